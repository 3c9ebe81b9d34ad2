"""Content-hash identities for accounts, transactions and import batches.

Identifiers are derived purely from field values so the same logical
transaction exported twice maps to the same row. The hash function, the
16-character truncation and the field join below are part of the stored data
format: changing any of them orphans every previously imported id.
"""

import hashlib
import json
from decimal import Decimal
from typing import Iterable, Optional

from copilot_cli.domain.entities import Transaction
from copilot_cli.utils.amount_parser import format_amount

ID_LENGTH = 16
FIELD_SEPARATOR = "|"

# Stored ids were produced with an absent account rendered as this literal.
MISSING_FIELD = "undefined"


def _sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def account_id(name: str) -> str:
    """Return the stable id for an account display name."""
    return _sha256_hex(name)[:ID_LENGTH]


def transaction_id(
    date: str, description: str, amount: Decimal, account: Optional[str]
) -> str:
    """Return the stable id for a transaction's (date, description, amount, account)."""
    parts = [
        MISSING_FIELD if date is None else str(date),
        MISSING_FIELD if description is None else description,
        format_amount(amount),
        MISSING_FIELD if account is None else account,
    ]
    return _sha256_hex(FIELD_SEPARATOR.join(parts))[:ID_LENGTH]


def transaction_id_for(txn: Transaction) -> str:
    """Return the stable id for a parsed transaction."""
    return transaction_id(txn.date, txn.description, txn.amount, txn.account)


def _json_amount(amount: Decimal) -> int | float:
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def serialize_batch(transactions: Iterable[Transaction]) -> str:
    """Serialize a batch deterministically.

    Fields appear in a fixed order and absent optional fields are omitted,
    so two batches with the same rows always serialize identically.
    """
    records = []
    for txn in transactions:
        record = {
            "date": txn.date,
            "description": txn.description,
            "merchant": txn.merchant,
            "category": txn.category,
            "amount": _json_amount(txn.amount),
            "account": txn.account,
            "notes": txn.notes,
            "type": txn.type,
        }
        records.append({key: value for key, value in record.items() if value is not None})
    return json.dumps(records, separators=(",", ":"), ensure_ascii=False)


def batch_checksum(transactions: Iterable[Transaction]) -> str:
    """Return the SHA-256 hex digest of a batch's serialization."""
    return _sha256_hex(serialize_batch(transactions))
