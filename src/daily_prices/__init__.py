"""Daily Prices: fetch and print a daily time series for one stock symbol."""

from importlib.metadata import PackageNotFoundError, version as _version

__all__ = ["get_version"]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return _version("daily-prices")
    except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
        return "0.0.0"
