"""Typer CLI for Daily Prices."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape

from . import get_version
from .config import ConfigBundle, load_config_bundle
from .errors import DailyPricesError
from .log import configure_logging
from .pipeline import DailyReportService
from .providers.base import DataProvider

app = typer.Typer(help="Daily Prices CLI")
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _build_provider(config: ConfigBundle) -> DataProvider:
    module = importlib.import_module(config.provider.module)
    if hasattr(module, "build_provider"):
        return module.build_provider(config)
    provider_cls = getattr(module, "Provider")
    return provider_cls(config)


@app.command()
def show(
    symbol: Optional[str] = typer.Option(None, help="Ticker symbol, e.g. PLTR (env: SYMBOL)"),
    api_key: Optional[str] = typer.Option(None, help="Alpha Vantage API key (env: API_KEY)"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to providers.yml"),
    newest_first: bool = typer.Option(False, help="Print the most recent day first"),
    limit: Optional[int] = typer.Option(None, min=0, help="Only print the N most recent days"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr"),
) -> None:
    """Fetch the daily time series for a symbol and print it by date."""
    configure_logging(verbose)
    try:
        config = load_config_bundle(config_path, symbol=symbol, api_key=api_key)
        provider = _build_provider(config)
        DailyReportService(provider, config).run(newest_first=newest_first, limit=limit)
    except DailyPricesError as exc:
        logger.debug("%s: %s", type(exc).__name__, exc)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def version() -> None:
    """Print the installed version."""
    rprint(f"[cyan]daily-prices {get_version()}[/cyan]")


if __name__ == "__main__":
    app()
