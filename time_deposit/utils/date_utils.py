"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Optional


def add_calendar_days(from_date: date, days: int) -> date:
    """Add calendar days to a date (no business-day or holiday adjustment)"""
    return from_date + timedelta(days=days)


def to_iso_date(value: Optional[date]) -> Optional[str]:
    """Format a date as ISO-8601 (YYYY-MM-DD), passing None through"""
    return value.isoformat() if value is not None else None
