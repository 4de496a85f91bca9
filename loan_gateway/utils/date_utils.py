"""Date manipulation utilities"""

from datetime import date
from typing import Optional


def century_start(century_digit: int) -> Optional[int]:
    """Map an Estonian personal code's first digit to the first year of its century"""
    if not 1 <= century_digit <= 8:
        return None
    return 1800 + ((century_digit - 1) // 2) * 100


def safe_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, returning None instead of raising for impossible values"""
    try:
        return date(year, month, day)
    except ValueError:
        return None
