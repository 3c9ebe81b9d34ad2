"""Mapper functions to convert SQLAlchemy models and result rows to domain entities.

This layer isolates the conversion logic: rows are validated and converted
once here, so services and commands only ever see typed domain records.
"""

from decimal import Decimal
from typing import Any, Optional

from copilot_cli.domain import entities as domain
from copilot_cli.utils.amount_parser import MAX_AMOUNT
from copilot_cli.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    ImportRecord as ORMImportRecord,
)

CENTS = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Convert a stored or aggregated amount to a Decimal with cents precision.

    NULL aggregates (e.g. SUM over no rows) become zero, as do values that
    cannot be held as cents, such as a stored float infinity.
    """
    if value is None:
        return Decimal("0.00")
    amount = Decimal(str(value))
    if not amount.is_finite() or abs(amount) >= MAX_AMOUNT:
        return Decimal("0.00")
    return amount.quantize(CENTS)


def _optional_money(value: Any) -> Optional[Decimal]:
    return None if value is None else to_money(value)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=orm_account.type,
        institution=orm_account.institution,
        balance=_optional_money(orm_account.balance),
        currency=orm_account.currency or "USD",
        last_updated=orm_account.last_updated,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        parent_id=orm_category.parent_id,
        color=orm_category.color,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.PersistedTransaction:
    """Convert SQLAlchemy Transaction model to domain PersistedTransaction entity."""
    return domain.PersistedTransaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        merchant=orm_transaction.merchant,
        category=orm_transaction.category,
        amount=to_money(orm_transaction.amount),
        type=orm_transaction.type,
        notes=orm_transaction.notes,
        is_pending=bool(orm_transaction.is_pending),
        imported_at=orm_transaction.imported_at,
    )


def import_record_to_domain(orm_import: ORMImportRecord) -> domain.ImportRecord:
    """Convert SQLAlchemy ImportRecord model to domain ImportRecord entity."""
    return domain.ImportRecord(
        id=orm_import.id,
        filename=orm_import.filename,
        imported_at=orm_import.imported_at,
        record_count=orm_import.record_count or 0,
        checksum=orm_import.checksum,
    )


def category_total_from_row(row: Any) -> domain.CategoryTotal:
    """Convert a (category, total, transaction_count) aggregate row."""
    return domain.CategoryTotal(
        category=row.category,
        total=to_money(row.total),
        count=int(row.transaction_count),
    )


def monthly_total_from_row(row: Any) -> domain.MonthlyTotal:
    """Convert a (month, income, expenses, net) aggregate row."""
    return domain.MonthlyTotal(
        month=row.month,
        income=to_money(row.income),
        expenses=to_money(row.expenses),
        net=to_money(row.net),
    )


def overview_from_row(row: Any) -> domain.Overview:
    """Convert an overview aggregate row."""
    return domain.Overview(
        total_transactions=int(row.total_transactions or 0),
        total_income=to_money(row.total_income),
        total_expenses=to_money(row.total_expenses),
        net=to_money(row.net),
        average_expense=to_money(row.average_expense),
    )
