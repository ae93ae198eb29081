"""
Canonical timestamp formatting shared by the schemas and the store.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Union


def format_timestamp(value: Union[datetime, date]) -> str:
    """
    Render a date or datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Plain dates become midnight UTC; naive datetimes are taken as UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return format_timestamp(datetime.now(timezone.utc))
