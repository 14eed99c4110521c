"""Date codec for time-series keys and chronological ordering."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable, TypeVar

from ..errors import DateParseError

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

T = TypeVar("T")


def parse_date(value: str) -> date:
    # strptime alone accepts single-digit fields and non-ASCII digits
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise DateParseError(str(value))
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(value) from exc


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def order_dates(keys: Iterable[str], newest_first: bool = False) -> list[date]:
    """Parse date keys and return them in calendar order.

    Keys are unique per trading day, so no tie-break is needed. The first key
    that fails to parse aborts the whole ordering with ``DateParseError``.
    """
    return sorted((parse_date(key) for key in keys), reverse=newest_first)


def sort_records(records: Iterable[T], newest_first: bool = False) -> list[T]:
    """Order anything with a ``date`` attribute, oldest first by default."""
    return sorted(records, key=lambda record: record.date, reverse=newest_first)


__all__ = ["DATE_FORMAT", "format_date", "order_dates", "parse_date", "sort_records"]
