from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def format_query_date(value: DateLike) -> str:
    """
    Render a date-range bound the way the carts listing expects it: YYYY-MM-DD.
    Strings must start with an ISO date; anything after the date part is dropped.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10]).isoformat()
    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")
