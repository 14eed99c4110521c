"""Plain-text console report for a daily series."""

from __future__ import annotations

from typing import Callable, Iterable

import typer

from ..series.dates import format_date
from ..series.models import DailyRecord, DailySeries, Metadata

SEPARATOR = "=" * 29
LABEL_WIDTH = 14


def _line(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}"


def _metadata_block(metadata: Metadata) -> list[str]:
    return [
        _line("Information", metadata.information),
        _line("Symbol", metadata.symbol),
        _line("Last Refresh", metadata.last_refreshed),
        _line("Timezone", metadata.time_zone),
    ]


def _record_block(record: DailyRecord) -> list[str]:
    return [
        _line("Date", format_date(record.date)),
        _line("Open", record.open),
        _line("High", record.high),
        _line("Low", record.low),
        _line("Close", record.close),
        _line("Volume", record.volume),
    ]


def render_report(series: DailySeries, records: Iterable[DailyRecord] | None = None) -> list[str]:
    """Render the metadata block then one block per record, each behind a separator.

    ``records`` defaults to the series' own records; pass a subset or a
    reordering to print something else.
    """
    lines = [SEPARATOR, *_metadata_block(series.metadata)]
    for record in series.records if records is None else records:
        lines.append(SEPARATOR)
        lines.extend(_record_block(record))
    lines.append(SEPARATOR)
    return lines


def print_report(
    series: DailySeries,
    records: Iterable[DailyRecord] | None = None,
    echo: Callable[[str], None] = typer.echo,
) -> None:
    for line in render_report(series, records):
        echo(line)


__all__ = ["SEPARATOR", "print_report", "render_report"]
