"""Typed views over the Alpha Vantage daily time-series payload."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

META_DATA_KEY = "Meta Data"
TIME_SERIES_KEY = "Time Series (Daily)"


class Metadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    information: str = Field("", alias="1. Information")
    symbol: str = Field("", alias="2. Symbol")
    last_refreshed: str = Field("", alias="3. Last Refreshed")
    time_zone: str = Field("", alias="5. Time Zone")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DailyRecord(BaseModel):
    """One trading day. Prices and volume are kept as the API's own strings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    date: dt.date
    open: str = Field("", alias="1. open")
    high: str = Field("", alias="2. high")
    low: str = Field("", alias="3. low")
    close: str = Field("", alias="4. close")
    # TIME_SERIES_DAILY numbers volume 5, the adjusted endpoint numbers it 6
    volume: str = Field(
        "",
        validation_alias=AliasChoices("6. volume", "5. volume"),
    )

    @field_validator("open", "high", "low", "close", "volume", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DailySeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    metadata: Metadata = Field(default_factory=Metadata)
    records: tuple[DailyRecord, ...] = ()

    @property
    def dates(self) -> list[dt.date]:
        return [record.date for record in self.records]


__all__ = ["DailyRecord", "DailySeries", "META_DATA_KEY", "Metadata", "TIME_SERIES_KEY"]
