"""Shared serialization utilities for reports and sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Decimals become strings so money keeps its exact digits.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
