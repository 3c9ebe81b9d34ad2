"""Utility functions for copilot_cli."""

from copilot_cli.utils.date_parser import normalize_date
from copilot_cli.utils.amount_parser import parse_amount

__all__ = ["normalize_date", "parse_amount"]
