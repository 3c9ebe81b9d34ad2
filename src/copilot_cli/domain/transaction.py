"""Transaction domain service."""

from typing import Optional

from copilot_cli.database.base import Database
from copilot_cli.domain.entities import PersistedTransaction, TransactionFilter
from copilot_cli.domain.errors import ValidationError


class TransactionService:
    """Service for querying stored transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_transactions(
        self, txn_filter: Optional[TransactionFilter] = None
    ) -> list[PersistedTransaction]:
        """List transactions matching a filter, newest first.

        Args:
            txn_filter: Filters to apply; defaults to the 50 newest transactions

        Returns:
            List of transactions

        Raises:
            ValidationError: If days or limit is negative, or min exceeds max
        """
        if txn_filter is None:
            txn_filter = TransactionFilter()

        if txn_filter.days is not None and txn_filter.days < 0:
            raise ValidationError(f"Days must be non-negative, got {txn_filter.days}")
        if txn_filter.limit < 0:
            raise ValidationError(f"Limit must be non-negative, got {txn_filter.limit}")
        if (
            txn_filter.min_amount is not None
            and txn_filter.max_amount is not None
            and txn_filter.min_amount > txn_filter.max_amount
        ):
            raise ValidationError(
                f"Minimum amount {txn_filter.min_amount} is greater than maximum {txn_filter.max_amount}"
            )

        return self.db.list_transactions(txn_filter)

    def get_transaction(self, transaction_id: str) -> Optional[PersistedTransaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Content-hash transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def is_empty(self) -> bool:
        """Return True if nothing has been imported yet."""
        return self.db.count_transactions() == 0
