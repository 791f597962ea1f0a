from __future__ import annotations

from datetime import date, datetime
from typing import Optional

ISO_DATE = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE).date()


def try_parse_iso_date(value: str) -> Optional[date]:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        return None


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE)


def format_short_date(value: date) -> str:
    """Chart label, e.g. 03/14."""
    return value.strftime("%m/%d")


def format_clock(value: datetime) -> str:
    return value.strftime("%H:%M")


def weekday_name(value: date) -> str:
    """Lower-case English weekday name, matching stored schedule days."""
    return value.strftime("%A").lower()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
