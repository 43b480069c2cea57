"""Utility functions for duobalance."""

from duobalance.utils.amount_parser import parse_amount
from duobalance.utils.date_parser import parse_date

__all__ = ["parse_date", "parse_amount"]
