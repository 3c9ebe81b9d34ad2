"""SQLAlchemy models for copilot_cli database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Account model. `id` is a content hash of `name`."""

    __tablename__ = "accounts"

    id = Column(String(16), primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=True)
    institution = Column(String, nullable=True)
    balance = Column(Numeric(12, 2), nullable=True)
    currency = Column(String, default="USD", server_default="USD")
    last_updated = Column(DateTime, nullable=True)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class Transaction(Base):
    """Transaction model. `id` is a content hash of date, description, amount and account."""

    __tablename__ = "transactions"

    id = Column(String(16), primary_key=True)
    account_id = Column(String(16), ForeignKey("accounts.id"), nullable=True, index=True)
    # Stored as text: exports with unreadable dates keep their raw value
    date = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    merchant = Column(String, nullable=True)
    category = Column(String, nullable=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    is_pending = Column(Boolean, default=False, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")


class Category(Base):
    """Category model with hierarchical structure. Reserved for future use."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    parent_id = Column(String, ForeignKey("categories.id"), nullable=True)
    color = Column(String, nullable=True)

    # Relationships
    parent = relationship("Category", remote_side=[id], backref="children")


class ImportRecord(Base):
    """Ledger of completed imports, keyed by batch checksum."""

    __tablename__ = "imports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    record_count = Column(Integer, nullable=True)
    checksum = Column(String, nullable=True, index=True)


def _enable_wal(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_wal)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
