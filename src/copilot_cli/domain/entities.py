"""Domain model entities for copilot_cli.

These are pure data classes representing business concepts, independent of
database schema. Store rows and aggregate results are converted into these
once, at the database boundary, so nothing above that layer handles raw rows.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """A transaction as parsed from an export, before it is persisted.

    `date` is ISO formatted when the export's date could be read, otherwise
    it is the raw string from the file.
    """

    date: str
    description: str
    amount: Decimal
    merchant: Optional[str] = None
    category: Optional[str] = None
    account: Optional[str] = None
    notes: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class PersistedTransaction:
    """Transaction domain entity as stored."""

    id: str
    account_id: Optional[str]
    date: str
    description: Optional[str]
    merchant: Optional[str]
    category: Optional[str]
    amount: Decimal
    type: Optional[str]
    notes: Optional[str]
    is_pending: bool
    imported_at: datetime


@dataclass(frozen=True)
class Account:
    """Account domain entity."""

    id: str
    name: str
    type: Optional[str]
    institution: Optional[str]
    balance: Optional[Decimal]
    currency: str
    last_updated: Optional[datetime]


@dataclass(frozen=True)
class Category:
    """Category domain entity (reserved; not populated by imports)."""

    id: str
    name: str
    parent_id: Optional[str]
    color: Optional[str]


@dataclass(frozen=True)
class ImportRecord:
    """One successful import, keyed by the checksum of its batch."""

    id: int
    filename: str
    imported_at: datetime
    record_count: int
    checksum: str


@dataclass(frozen=True)
class ImportResult:
    """Outcome of an import.

    `skipped` counts both rows that already existed and whole batches that
    were already imported; the two causes are not distinguished.
    """

    imported: int
    skipped: int


@dataclass(frozen=True)
class TransactionFilter:
    """Filters for transaction listing. Unset filters match everything."""

    days: Optional[int] = None
    category: Optional[str] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None
    search: Optional[str] = None
    limit: int = 50


@dataclass(frozen=True)
class CategoryTotal:
    """Spending aggregate for one category."""

    category: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class MonthlyTotal:
    """Income and expense aggregate for one YYYY-MM month."""

    month: str
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class Overview:
    """Totals over a window of days."""

    total_transactions: int
    total_income: Decimal
    total_expenses: Decimal
    net: Decimal
    average_expense: Decimal
