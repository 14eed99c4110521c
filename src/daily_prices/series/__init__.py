"""Daily time-series models, decoding and ordering."""

from .dates import DATE_FORMAT, format_date, order_dates, parse_date, sort_records
from .decoder import decode_response
from .models import DailyRecord, DailySeries, Metadata

__all__ = [
    "DATE_FORMAT",
    "DailyRecord",
    "DailySeries",
    "Metadata",
    "decode_response",
    "format_date",
    "order_dates",
    "parse_date",
    "sort_records",
]
