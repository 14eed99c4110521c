import pytest
import requests

from daily_prices.errors import NetworkError
from daily_prices.providers import SeriesRequest
from daily_prices.providers.alphavantage import AlphaVantageProvider, build_provider


class FakeResponse:
    def __init__(self, content=b"{}", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Server Error")


def test_fetch_daily_sends_query(monkeypatch, sample_config, pltr_body):
    calls = {}

    def fake_get(url, params=None, timeout=None):
        calls.update(url=url, params=params, timeout=timeout)
        return FakeResponse(pltr_body)

    monkeypatch.setattr(requests, "get", fake_get)
    provider = build_provider(sample_config)
    body = provider.fetch_daily(SeriesRequest(symbol="PLTR"))

    assert body == pltr_body
    assert calls["url"] == "https://example.test/query"
    assert calls["params"] == {
        "function": "TIME_SERIES_DAILY_ADJUSTED",
        "symbol": "PLTR",
        "apikey": "demo-key",
    }
    assert calls["timeout"] == 5


def test_connection_refused_raises_network_error(monkeypatch, sample_config):
    def refuse(*args, **kwargs):
        raise requests.exceptions.ConnectionError("Connection refused for apikey=demo-key")

    monkeypatch.setattr(requests, "get", refuse)
    with pytest.raises(NetworkError) as excinfo:
        AlphaVantageProvider(sample_config).fetch_daily(SeriesRequest(symbol="PLTR"))
    assert "demo-key" not in str(excinfo.value)


def test_http_error_status_raises_network_error(monkeypatch, sample_config):
    monkeypatch.setattr(requests, "get", lambda *a, **k: FakeResponse(b"", status_code=503))
    with pytest.raises(NetworkError, match="503"):
        AlphaVantageProvider(sample_config).fetch_daily(SeriesRequest(symbol="PLTR"))
