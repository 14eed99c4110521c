"""Decode a raw daily time-series response into a sorted ``DailySeries``."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from ..errors import ApiError, DecodeError
from .dates import parse_date, sort_records
from .models import META_DATA_KEY, TIME_SERIES_KEY, DailyRecord, DailySeries, Metadata

logger = logging.getLogger(__name__)

# Alpha Vantage answers HTTP 200 with one of these when the call is refused
API_MESSAGE_KEYS = ("Error Message", "Note", "Information")


def decode_response(raw: bytes | str) -> DailySeries:
    """Build a ``DailySeries`` from a JSON document.

    Missing sections and fields decode as empty strings. Malformed JSON, a
    section of the wrong type, or an API error payload raises. Date keys are
    parsed up front so a bad key fails the whole decode.
    """
    payload = _load_json(raw)
    _raise_for_api_message(payload)

    metadata = _decode_metadata(_section(payload, META_DATA_KEY))
    records = [
        _decode_record(key, value)
        for key, value in _section(payload, TIME_SERIES_KEY).items()
    ]
    logger.debug("Decoded %d daily records for %r", len(records), metadata.symbol)
    return DailySeries(
        metadata=metadata,
        records=tuple(sort_records(records)),
    )


def _load_json(raw: bytes | str) -> Dict[str, Any]:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Malformed JSON response: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def _raise_for_api_message(payload: Dict[str, Any]) -> None:
    if TIME_SERIES_KEY in payload:
        return
    for key in API_MESSAGE_KEYS:
        if key in payload:
            raise ApiError(str(payload[key]))


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{key!r} must be a JSON object, got {type(value).__name__}")
    return value


def _decode_metadata(section: Dict[str, Any]) -> Metadata:
    try:
        return Metadata.model_validate(section)
    except ValidationError as exc:
        raise DecodeError(f"Invalid {META_DATA_KEY!r} section: {exc}") from exc


def _decode_record(key: str, value: Any) -> DailyRecord:
    day = parse_date(key)
    if value is None:
        value = {}
    if not isinstance(value, dict):
        raise DecodeError(f"Record for {key} must be a JSON object, got {type(value).__name__}")
    try:
        return DailyRecord.model_validate({**value, "date": day})
    except ValidationError as exc:
        raise DecodeError(f"Invalid record for {key}: {exc}") from exc


__all__ = ["API_MESSAGE_KEYS", "decode_response"]
