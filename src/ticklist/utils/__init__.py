"""Utility helpers."""

from .datetime import end_of_day, now_local, parse_due_date

__all__ = [
    "end_of_day",
    "now_local",
    "parse_due_date",
]
