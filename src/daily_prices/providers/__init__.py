"""Market data providers."""

from .base import DataProvider, SeriesRequest

__all__ = ["DataProvider", "SeriesRequest"]
