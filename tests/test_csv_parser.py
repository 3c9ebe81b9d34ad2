"""Tests for parsing CSV exports into transactions."""

from decimal import Decimal

import pytest
from copilot_cli.domain.csv_import import parse_transactions_text
from copilot_cli.domain.entities import Transaction
from copilot_cli.domain.errors import MalformedInputError, NotFoundError


def test_parse_standard_export(csv_import_service, sample_csv):
    """The standard export format parses into normalized transactions."""
    transactions = csv_import_service.parse_file(str(sample_csv))

    assert len(transactions) == 3
    assert transactions[0] == Transaction(
        date="2024-01-15",
        description="Coffee Shop",
        merchant="Starbucks",
        category="Food & Drink",
        amount=Decimal("-5.50"),
        account="Checking",
        notes=None,
        type=None,
    )
    assert transactions[1].amount == Decimal("2500")
    assert transactions[2].amount == Decimal("-150.25")
    assert transactions[2].account == "Credit Card"


def test_parse_currency_amounts(csv_import_service, fixtures_dir):
    """Quoted currency and accounting-notation amounts are parsed."""
    transactions = csv_import_service.parse_file(str(fixtures_dir / "currency_amounts.csv"))

    assert transactions[0].amount == Decimal("1234.56")
    assert transactions[1].amount == Decimal("-50")


def test_parse_name_alias_for_description():
    """'Name' and 'name' headers supply the description."""
    transactions = parse_transactions_text(
        "date,name,amount,type\n2024-01-15,Coffee Shop,-5.50,regular\n"
    )

    assert transactions[0].description == "Coffee Shop"
    assert transactions[0].type == "regular"
    assert transactions[0].date == "2024-01-15"


def test_parse_prefers_canonical_header():
    """Description wins over Name; an empty Description falls back to Name."""
    transactions = parse_transactions_text(
        "Date,Description,Name,Amount\n"
        "2024-01-15,Preferred,Ignored,-1.00\n"
        "2024-01-16,,Fallback,-2.00\n"
    )

    assert transactions[0].description == "Preferred"
    assert transactions[1].description == "Fallback"


def test_parse_missing_optional_fields_become_none():
    """No row is dropped for missing optional fields."""
    transactions = parse_transactions_text(
        "Date,Description,Merchant,Amount\n2024-01-15,Coffee Shop,,-5.50\n"
    )

    assert len(transactions) == 1
    txn = transactions[0]
    assert txn.merchant is None
    assert txn.category is None
    assert txn.account is None
    assert txn.notes is None
    assert txn.type is None


def test_parse_missing_description_and_amount_defaults():
    """Missing description is empty and missing amount is zero."""
    transactions = parse_transactions_text("Date,Category\n2024-01-15,Misc\n")

    assert transactions[0].description == ""
    assert transactions[0].amount == Decimal("0")


def test_parse_skips_blank_lines():
    """Blank lines do not produce transactions."""
    transactions = parse_transactions_text(
        "Date,Description,Amount\n\n2024-01-15,A,-1.00\n\n2024-01-16,B,-2.00\n\n"
    )

    assert [txn.description for txn in transactions] == ["A", "B"]


def test_parse_trims_whitespace():
    """Headers and values are trimmed."""
    transactions = parse_transactions_text(
        " Date , Description , Amount \n 2024-01-15 ,  Coffee Shop , -5.50 \n"
    )

    assert transactions[0].date == "2024-01-15"
    assert transactions[0].description == "Coffee Shop"
    assert transactions[0].amount == Decimal("-5.50")


def test_parse_soft_fallbacks_do_not_raise():
    """Unreadable dates pass through and unreadable amounts become zero."""
    transactions = parse_transactions_text(
        "Date,Description,Amount\nsometime,Mystery,garbage\n"
    )

    assert transactions[0].date == "sometime"
    assert transactions[0].amount == Decimal("0")


def test_parse_normalizes_dates():
    """US-style dates are normalized to ISO."""
    transactions = parse_transactions_text("Date,Description,Amount\n01/15/2024,A,-1\n")

    assert transactions[0].date == "2024-01-15"


def test_parse_semicolon_delimiter():
    """The delimiter is detected from the header."""
    transactions = parse_transactions_text(
        "Date;Description;Amount\n2024-01-15;Coffee Shop;-5.50\n"
    )

    assert transactions[0].description == "Coffee Shop"
    assert transactions[0].amount == Decimal("-5.50")


def test_parse_header_only():
    """A file with only a header has no transactions."""
    assert parse_transactions_text("Date,Description,Amount\n") == []
    assert parse_transactions_text("") == []


def test_parse_unbalanced_quotes_raises(csv_import_service, fixtures_dir):
    """Unbalanced quoting fails the whole parse."""
    with pytest.raises(MalformedInputError) as excinfo:
        csv_import_service.parse_file(str(fixtures_dir / "malformed_quotes.csv"))

    assert "malformed_quotes.csv" in str(excinfo.value)
    assert excinfo.value.filename.endswith("malformed_quotes.csv")


def test_parse_inconsistent_column_count_raises():
    """A row wider or narrower than the header fails the whole parse."""
    with pytest.raises(MalformedInputError) as excinfo:
        parse_transactions_text("Date,Description,Amount\n2024-01-15,Coffee Shop\n")
    assert "expected 3 columns, found 2" in str(excinfo.value)
    assert excinfo.value.line == 2

    with pytest.raises(MalformedInputError):
        parse_transactions_text("Date,Description,Amount\n2024-01-15,Coffee,Shop,-5.50\n")


def test_malformed_input_is_validation_error():
    """MalformedInputError keeps ValueError compatibility."""
    with pytest.raises(ValueError):
        parse_transactions_text('Date,Description,Amount\n2024-01-15,"Coffee,-5.50\n')


def test_parse_missing_file_raises(csv_import_service, tmp_path):
    """A missing file raises NotFoundError."""
    with pytest.raises(NotFoundError):
        csv_import_service.parse_file(str(tmp_path / "missing.csv"))


def test_parse_utf8_bom(csv_import_service, tmp_path):
    """A UTF-8 byte order mark does not corrupt the first header."""
    csv_path = tmp_path / "bom.csv"
    csv_path.write_text("Date,Description,Amount\n2024-01-15,Café,-3.20\n", encoding="utf-8-sig")

    transactions = csv_import_service.parse_file(str(csv_path))

    assert transactions[0].date == "2024-01-15"
    assert transactions[0].description == "Café"
