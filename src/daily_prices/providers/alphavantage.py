"""Alpha Vantage provider implementation."""

from __future__ import annotations

import logging

import requests

from ..config import ConfigBundle
from ..errors import NetworkError
from .base import DataProvider, SeriesRequest

logger = logging.getLogger(__name__)


class AlphaVantageProvider(DataProvider):
    name = "alphavantage"

    def __init__(self, config: ConfigBundle):
        self.config = config

    @property
    def url(self) -> str:
        return f"{self.config.provider.base_url.rstrip('/')}/query"

    def fetch_daily(self, request: SeriesRequest) -> bytes:
        params = {
            "function": request.function,
            "symbol": request.symbol,
            "apikey": self.config.query.api_key,
        }
        logger.info(
            "GET %s function=%s symbol=%s apikey=%s",
            self.url,
            request.function,
            request.symbol,
            _mask(params["apikey"]),
        )
        try:
            resp = requests.get(self.url, params=params, timeout=self.config.provider.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as exc:
            raise NetworkError(f"Request for {request.symbol} failed: {_redact(exc, params['apikey'])}") from exc
        logger.info("Received %d bytes for %s", len(resp.content), request.symbol)
        return resp.content


def _mask(key: str | None) -> str:
    if not key:
        return ""
    return key[:2] + "*" * max(len(key) - 2, 0)


def _redact(exc: Exception, key: str | None) -> str:
    text = str(exc)
    if key:
        text = text.replace(key, _mask(key))
    return text


def build_provider(config: ConfigBundle) -> DataProvider:
    return AlphaVantageProvider(config)
