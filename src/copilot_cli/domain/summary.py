"""Summary aggregation domain service."""

from typing import Optional

from copilot_cli.database.base import Database
from copilot_cli.domain.entities import CategoryTotal, MonthlyTotal, Overview
from copilot_cli.domain.errors import ValidationError
from copilot_cli.utils.date_parser import days_ago


def _since(days: Optional[int]) -> Optional[str]:
    if days is None:
        return None
    if days < 0:
        raise ValidationError(f"Days must be non-negative, got {days}")
    return days_ago(days)


class SummaryService:
    """Service for category and month aggregates.

    Every call re-queries the store; nothing is cached.
    """

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def by_category(self, days: Optional[int] = None) -> list[CategoryTotal]:
        """Group expenses by category.

        Only negative amounts count. Transactions without a category are
        grouped as "Uncategorized". Results are ordered by total ascending,
        so the largest spending comes first.

        Args:
            days: Only include the last N days; None means all time
        """
        return self.db.get_category_totals(since=_since(days))

    def by_month(self, months: int = 12) -> list[MonthlyTotal]:
        """Income, expenses and net for the most recent months, newest first."""
        if months < 0:
            raise ValidationError(f"Months must be non-negative, got {months}")
        return self.db.get_monthly_totals(limit=months)

    def overview(self, days: Optional[int] = 30) -> Overview:
        """Count, income, expenses, net and average expense over the last N days."""
        return self.db.get_overview(since=_since(days))
