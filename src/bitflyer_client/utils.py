"""
Utility functions for bitFlyer client.

Helper functions for converting between JSON payload values and model values.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

import simplejson


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON number (or numeric string) to Decimal.

    Raises:
        TypeError: If value is not a number or string
        ValueError: If value cannot be parsed as a number or is not finite
    """
    # bool is an int subclass, but never a valid price or size
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid numeric value: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Numeric value must be finite: {value!r}")
    return result


def to_int(value: Any) -> int:
    """Convert a JSON integer to int, rejecting floats with a fraction."""
    if isinstance(value, bool):
        raise TypeError("Expected an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    # JSON floats are decoded as Decimal
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise TypeError(f"Expected an integer, got {value!r}")


def to_str(value: Any) -> str:
    """Ensure a JSON value is a string."""
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")
    return value


def dumps_json(data: Any) -> str:
    """Serialize to compact JSON, writing Decimals with full precision."""
    return simplejson.dumps(data, use_decimal=True, separators=(",", ":"))


def require_object(data: Any) -> Dict[str, Any]:
    """Ensure a decoded payload is a JSON object."""
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(("http://", "https://")) and "." in url
