"""Utility functions for cashtrack."""

from cashtrack.utils.date_parser import parse_date
from cashtrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
