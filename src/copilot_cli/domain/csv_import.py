"""CSV import domain service."""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Optional

from copilot_cli.database.base import Database
from copilot_cli.domain.entities import ImportResult, Transaction
from copilot_cli.domain.errors import (
    MalformedInputError,
    NotFoundError,
    column_count_mismatch,
    file_not_found,
)
from copilot_cli.utils.amount_parser import parse_amount
from copilot_cli.utils.date_parser import normalize_date
from copilot_cli.utils.identity import batch_checksum

logger = logging.getLogger(__name__)

# Header names seen in exports over time, in order of preference.
# Copilot.money has used "Name" for the transaction description.
HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "date": ("Date", "date"),
    "description": ("Description", "description", "Name", "name"),
    "merchant": ("Merchant", "merchant"),
    "category": ("Category", "category"),
    "amount": ("Amount", "amount"),
    "account": ("Account", "account"),
    "notes": ("Notes", "notes"),
    "type": ("Type", "type"),
}

SNIFF_DELIMITERS = ",;\t|"


def _resolve_field(record: dict[str, str], field: str) -> Optional[str]:
    """Return the first non-empty value among a field's header aliases."""
    for header in HEADER_ALIASES[field]:
        value = record.get(header)
        if value:
            return value
    return None


def _detect_delimiter(content: str) -> str:
    """Detect the delimiter from the header line, defaulting to a comma."""
    header_line = content.split("\n", 1)[0]
    try:
        return csv.Sniffer().sniff(header_line, delimiters=SNIFF_DELIMITERS).delimiter
    except csv.Error:
        return ","


def record_to_transaction(record: dict[str, str]) -> Transaction:
    """Normalize one raw CSV record into a Transaction."""
    return Transaction(
        date=normalize_date(_resolve_field(record, "date") or ""),
        description=_resolve_field(record, "description") or "",
        merchant=_resolve_field(record, "merchant"),
        category=_resolve_field(record, "category"),
        amount=parse_amount(_resolve_field(record, "amount") or "0"),
        account=_resolve_field(record, "account"),
        notes=_resolve_field(record, "notes"),
        type=_resolve_field(record, "type"),
    )


def parse_transactions_text(content: str, filename: Optional[str] = None) -> list[Transaction]:
    """Parse delimited text with a header row into transactions.

    Every non-blank row becomes exactly one transaction. Missing optional
    fields become None; unreadable dates and amounts fall back rather than
    fail.

    Args:
        content: Full file content
        filename: Source name used in error messages

    Returns:
        List of transactions in file order

    Raises:
        MalformedInputError: On unbalanced quoting or a row whose column count
            differs from the header. Nothing is returned in that case.
    """
    reader = csv.reader(io.StringIO(content), delimiter=_detect_delimiter(content), strict=True)
    transactions = []

    try:
        header = None
        for row in reader:
            if not row:
                continue
            if header is None:
                header = [name.strip() for name in row]
                continue
            if len(row) != len(header):
                raise MalformedInputError(
                    column_count_mismatch(len(header), len(row)),
                    filename=filename,
                    line=reader.line_num,
                )
            record = dict(zip(header, (value.strip() for value in row)))
            transactions.append(record_to_transaction(record))
    except csv.Error as e:
        raise MalformedInputError(str(e), filename=filename, line=reader.line_num) from e

    logger.debug("Parsed %d transactions from %s", len(transactions), filename or "<text>")
    return transactions


class CSVImportService:
    """Service for parsing transaction exports and importing them."""

    def __init__(self, db: Database):
        """Initialize CSV import service.

        Args:
            db: Database instance
        """
        self.db = db

    def parse_file(self, csv_file_path: str) -> list[Transaction]:
        """Parse a CSV export into transactions.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            List of parsed transactions

        Raises:
            NotFoundError: If the file doesn't exist
            MalformedInputError: If the file is not well-formed delimited text
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise NotFoundError(file_not_found(csv_file_path))

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            content = f.read()

        return parse_transactions_text(content, filename=str(csv_path))

    def import_transactions(
        self, transactions: Iterable[Transaction], filename: str
    ) -> ImportResult:
        """Import a batch of transactions.

        A batch whose checksum is already in the import ledger is skipped
        whole without touching the store. Otherwise the batch is inserted in
        a single atomic transaction; rows whose id already exists are
        ignored and counted as skipped.

        Args:
            transactions: Parsed transactions
            filename: Source file name recorded in the import ledger

        Returns:
            ImportResult with imported and skipped counts

        Raises:
            StorageError: If the batch could not be written (nothing is committed)
        """
        transactions = list(transactions)
        checksum = batch_checksum(transactions)

        existing = self.db.get_import_by_checksum(checksum)
        if existing is not None:
            logger.info(
                "Batch from %s already imported as %s (import #%d), skipping",
                filename,
                existing.filename,
                existing.id,
            )
            return ImportResult(imported=0, skipped=len(transactions))

        imported = self.db.import_batch(transactions, filename, checksum)
        skipped = len(transactions) - imported
        logger.info("Imported %d transactions from %s (%d skipped)", imported, filename, skipped)
        return ImportResult(imported=imported, skipped=skipped)

    def import_file(self, csv_file_path: str) -> ImportResult:
        """Parse a CSV export and import it, recording the path as the filename."""
        transactions = self.parse_file(csv_file_path)
        return self.import_transactions(transactions, csv_file_path)
