from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Any

from ..core.constants import MONTH_NAMES


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Any) -> date:
    """Accept a date, a datetime or an ISO-8601 date/datetime string.

    The backend serializes dates as full timestamps (``2024-03-05T00:00:00.000Z``);
    only the calendar day is kept.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10 and text[10] in ("T", " "):
            text = text[:10]
        return parse_iso_date(text)
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def week_label(week: int) -> str:
    return f"Week {week}"


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
