"""Error types raised along the fetch/decode/print pipeline."""

from __future__ import annotations


class DailyPricesError(Exception):
    """Base class for every failure the CLI reports and exits on."""


class ConfigError(DailyPricesError):
    pass


class NetworkError(DailyPricesError):
    pass


class ApiError(DailyPricesError):
    """The API answered, but with an error or rate-limit payload instead of data."""


class DecodeError(DailyPricesError):
    pass


class DateParseError(DecodeError):
    def __init__(self, value: str):
        super().__init__(f"Invalid date {value!r}: expected YYYY-MM-DD")
        self.value = value


__all__ = [
    "ApiError",
    "ConfigError",
    "DailyPricesError",
    "DateParseError",
    "DecodeError",
    "NetworkError",
]
