"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

ZERO = Decimal("0")

# Stored as NUMERIC(12, 2): at most ten integer digits
MAX_AMOUNT = Decimal("1e10")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Unlike strict parsing, this never raises. Anything that cannot be read as
    a finite number, or is too large to store as cents, yields Decimal("0"),
    so a bad cell costs precision rather than failing the whole import.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount
    """
    if not amount_str:
        return ZERO

    # Remove currency symbols and thousands separators
    cleaned = re.sub(r"[$,]", "", amount_str).strip()

    # Handle parentheses notation (negative)
    if cleaned.startswith("(") and cleaned.endswith(")"):
        cleaned = "-" + cleaned[1:-1].strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return ZERO

    if not amount.is_finite() or abs(amount) >= MAX_AMOUNT:
        return ZERO
    return amount


def format_amount(amount: Decimal) -> str:
    """Render an amount in its shortest plain numeric form.

    Trailing zeros are dropped and exponents are never used, so
    Decimal("-5.50") becomes "-5.5" and Decimal("2500.00") becomes "2500".
    Transaction identities are hashed over this form.
    """
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")
