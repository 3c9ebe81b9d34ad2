"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from copilot_cli.domain.entities import (
    Account,
    CategoryTotal,
    ImportRecord,
    MonthlyTotal,
    Overview,
    PersistedTransaction,
    Transaction,
    TransactionFilter,
)


class Database(ABC):
    """Abstract database interface for copilot_cli.

    An instance is passed explicitly to every service; there is no module
    level connection.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    # Transaction operations
    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[PersistedTransaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def count_transactions(self) -> int:
        """Return the total number of stored transactions."""
        pass

    @abstractmethod
    def list_transactions(self, txn_filter: TransactionFilter) -> list[PersistedTransaction]:
        """List transactions matching all set filters, newest first, capped at the filter limit."""
        pass

    # Import operations
    @abstractmethod
    def get_import_by_checksum(self, checksum: str) -> Optional[ImportRecord]:
        """Get the import record for a batch checksum, if that batch was imported."""
        pass

    @abstractmethod
    def list_imports(self) -> list[ImportRecord]:
        """List import records, oldest first."""
        pass

    @abstractmethod
    def import_batch(
        self, transactions: Sequence[Transaction], filename: str, checksum: str
    ) -> int:
        """Insert a batch atomically and record it in the import ledger.

        Accounts and transactions are inserted only if absent. Either every
        row of the batch becomes visible or none does.

        Returns:
            Number of transaction rows actually inserted

        Raises:
            StorageError: If the batch could not be written (it is rolled back)
        """
        pass

    # Aggregates
    @abstractmethod
    def get_category_totals(self, since: Optional[str] = None) -> list[CategoryTotal]:
        """Sum expenses by category, most negative total first.

        Args:
            since: Optional ISO date; only transactions on or after it count
        """
        pass

    @abstractmethod
    def get_monthly_totals(self, limit: int = 12) -> list[MonthlyTotal]:
        """Income, expenses and net per month, most recent first."""
        pass

    @abstractmethod
    def get_overview(self, since: Optional[str] = None) -> Overview:
        """Totals over all transactions on or after `since`."""
        pass
