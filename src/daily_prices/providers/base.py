"""Provider abstraction to isolate market data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SeriesRequest:
    symbol: str
    function: str = "TIME_SERIES_DAILY_ADJUSTED"


class DataProvider(Protocol):
    name: str

    def fetch_daily(self, request: SeriesRequest) -> bytes:
        """Fetch the raw JSON body of a daily time series."""


__all__ = ["DataProvider", "SeriesRequest"]
