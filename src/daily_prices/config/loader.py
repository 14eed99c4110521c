"""Load provider and query configuration from YAML, the environment and flags."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError

CONFIG_DIR = Path("configs")
PROVIDERS_PATH = CONFIG_DIR / "providers.yml"

SYMBOL_ENV = "SYMBOL"
API_KEY_ENV = "API_KEY"


class ProviderConfig(BaseModel):
    id: str = Field("alphavantage", description="Provider identifier")
    module: str = Field(
        "daily_prices.providers.alphavantage",
        description="Python path to provider implementation",
    )
    base_url: str = "https://www.alphavantage.co"
    function: str = "TIME_SERIES_DAILY_ADJUSTED"
    timeout: float = 30


class QueryConfig(BaseModel):
    symbol: str = "PLTR"
    api_key: Optional[str] = Field(None, repr=False)


class ConfigBundle(BaseModel):
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)


def load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def _merge_dict(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dict(base.get(key, {}), value)
        else:
            base[key] = value
    return base


def _load_file_config(path: Path | None) -> Dict[str, Any]:
    file_path = path or PROVIDERS_PATH
    if not file_path.exists():
        if path is not None:
            raise ConfigError(f"Config file {file_path} not found")
        return {}
    data = load_yaml(file_path)
    if not isinstance(data, dict):
        raise ConfigError(f"{file_path} must contain a mapping")
    providers = data.get("providers") or [{}]
    if not isinstance(providers, list) or not isinstance(providers[0], dict):
        raise ConfigError(f"{file_path}: providers must be a list of mappings")
    query = data.get("query") or {}
    if not isinstance(query, dict):
        raise ConfigError(f"{file_path}: query must be a mapping")
    return {"provider": providers[0], "query": query}


def _env_overrides() -> Dict[str, Any]:
    load_dotenv()
    query: Dict[str, Any] = {}
    if os.getenv(SYMBOL_ENV):
        query["symbol"] = os.environ[SYMBOL_ENV]
    if os.getenv(API_KEY_ENV):
        query["api_key"] = os.environ[API_KEY_ENV]
    return {"query": query}


def load_config_bundle(
    provider_path: Path | None = None,
    symbol: str | None = None,
    api_key: str | None = None,
) -> ConfigBundle:
    """Build the config: defaults, then YAML, then environment, then arguments."""
    raw = _merge_dict(_load_file_config(provider_path), _env_overrides())
    explicit = {key: value for key, value in {"symbol": symbol, "api_key": api_key}.items() if value}
    raw = _merge_dict(raw, {"query": explicit})
    try:
        bundle = ConfigBundle(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    if not bundle.query.api_key:
        raise ConfigError(f"No API key configured; set {API_KEY_ENV} or pass --api-key")
    if not bundle.query.symbol.strip():
        raise ConfigError(f"No symbol configured; set {SYMBOL_ENV} or pass --symbol")
    return bundle
