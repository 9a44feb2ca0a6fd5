"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime
from enum import Enum


def _convert(value, drop_none: bool):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {
            k: _convert(v, drop_none)
            for k, v in value.items()
            if not (drop_none and v is None)
        }
    if isinstance(value, list):
        return [_convert(v, drop_none) for v in value]
    return value


def serialize_dataclass(obj, drop_none: bool = False) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings.

    Enums are replaced by their values. With drop_none, keys whose value is
    None are omitted at every nesting level.
    """
    return _convert(asdict(obj), drop_none)
