"""Fetch, decode and print a daily series in one pass."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import typer

from .config import ConfigBundle
from .providers.base import DataProvider, SeriesRequest
from .reports import print_report
from .series import DailyRecord, DailySeries, decode_response, sort_records

logger = logging.getLogger(__name__)


class DailyReportService:
    """Run the provider call, decode the body, then print.

    Every failure propagates as a ``DailyPricesError``; output only starts once
    the whole response has decoded.
    """

    def __init__(self, provider: DataProvider, config: ConfigBundle):
        self.provider = provider
        self.config = config

    def fetch(self) -> DailySeries:
        request = SeriesRequest(
            symbol=self.config.query.symbol,
            function=self.config.provider.function,
        )
        body = self.provider.fetch_daily(request)
        return decode_response(body)

    def run(
        self,
        newest_first: bool = False,
        limit: Optional[int] = None,
        echo: Callable[[str], None] = typer.echo,
    ) -> DailySeries:
        series = self.fetch()
        records = select_records(series, newest_first=newest_first, limit=limit)
        logger.info("Printing %d of %d records", len(records), len(series.records))
        print_report(series, records, echo=echo)
        return series


def select_records(
    series: DailySeries, newest_first: bool = False, limit: Optional[int] = None
) -> list[DailyRecord]:
    """Keep the ``limit`` most recent records, in the requested order."""
    records = list(series.records)
    if limit is not None:
        records = records[-limit:] if limit > 0 else []
    return sort_records(records, newest_first=newest_first)


def run_pipeline(
    config: ConfigBundle,
    provider: DataProvider,
    newest_first: bool = False,
    limit: Optional[int] = None,
    echo: Callable[[str], None] = typer.echo,
) -> DailySeries:
    return DailyReportService(provider, config).run(newest_first=newest_first, limit=limit, echo=echo)


__all__ = ["DailyReportService", "run_pipeline", "select_records"]
