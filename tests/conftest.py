"""Shared pytest fixtures for copilot_cli tests."""

from decimal import Decimal
from pathlib import Path
import pytest

from copilot_cli.database.factories import create_sqlite_database
from copilot_cli.domain.csv_import import CSVImportService
from copilot_cli.domain.entities import Transaction
from copilot_cli.domain.summary import SummaryService
from copilot_cli.domain.transaction import TransactionService


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary database for testing."""
    db_path = tmp_path / "copilot-test.db"

    db = create_sqlite_database(database_path=str(db_path))
    # Store the path for tests that need it
    db.database_path = str(db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def csv_import_service(temp_db):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def sample_transactions():
    """The three transactions of the sample export."""
    return [
        Transaction(
            date="2024-01-15",
            description="Coffee Shop",
            merchant="Starbucks",
            category="Food & Drink",
            amount=Decimal("-5.50"),
            account="Checking",
        ),
        Transaction(
            date="2024-01-14",
            description="Paycheck",
            merchant="Employer",
            category="Income",
            amount=Decimal("2500.00"),
            account="Checking",
        ),
        Transaction(
            date="2024-01-13",
            description="Groceries",
            merchant="Whole Foods",
            category="Groceries",
            amount=Decimal("-150.25"),
            account="Credit Card",
        ),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_csv(fixtures_dir):
    """Path to the three-row sample export."""
    return fixtures_dir / "sample_transactions.csv"
