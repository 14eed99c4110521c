import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from daily_prices.config import ConfigBundle, ProviderConfig, QueryConfig  # noqa: E402


def build_payload(records: dict, meta: dict | None = None) -> dict:
    payload = {"Time Series (Daily)": records}
    if meta is not None:
        payload["Meta Data"] = meta
    return payload


def day(open_="1.0", high="2.0", low="0.5", close="1.5", volume="100") -> dict:
    return {
        "1. open": open_,
        "2. high": high,
        "3. low": low,
        "4. close": close,
        "5. adjusted close": close,
        "6. volume": volume,
        "7. dividend amount": "0.0000",
        "8. split coefficient": "1.0",
    }


@pytest.fixture()
def pltr_payload() -> dict:
    return build_payload(
        {
            "2020-11-11": day("19.90", "21.35", "19.05", "20.33", "103285834"),
            "2020-11-10": day("17.10", "20.10", "16.87", "19.72", "152458541"),
        },
        meta={
            "1. Information": "Daily Prices",
            "2. Symbol": "PLTR",
            "3. Last Refreshed": "2020-11-11",
            "4. Output Size": "Compact",
            "5. Time Zone": "US/Eastern",
        },
    )


@pytest.fixture()
def pltr_body(pltr_payload) -> bytes:
    return json.dumps(pltr_payload).encode("utf-8")


@pytest.fixture()
def sample_config() -> ConfigBundle:
    return ConfigBundle(
        provider=ProviderConfig(base_url="https://example.test", timeout=5),
        query=QueryConfig(symbol="PLTR", api_key="demo-key"),
    )


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("SYMBOL", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("daily_prices.config.loader.load_dotenv", lambda *a, **k: False)
    return tmp_path
