"""Explicit decoders for loosely-typed signaling payload values.

The conference server sends booleans as ints, strings or real booleans,
and numbers as numbers or numeric strings. These helpers give each
coercion one documented rule instead of inline casts at every call site.
"""
from __future__ import annotations

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def js_truthy(value: Any) -> bool:
    """Truthiness as the signaling layer means it.

    False for None, False, 0, NaN and "". Everything else, including the
    string "false" and empty containers, is True.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_number(value: Any) -> float:
    """Numeric conversion; NaN when the value has no numeric reading."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            return float(stripped)
        except ValueError:
            return math.nan
    return math.nan


def number_or(value: Any, default: Optional[Number] = 0) -> Optional[Number]:
    """Number of ``value``, or ``default`` when that number is 0 or NaN.

    Integral results come back as ``int``.
    """
    number = to_number(value)
    if number == 0 or math.isnan(number):
        return default
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def string_flag(value: Any) -> bool:
    """Flags carried in string-valued variables are only set by "true"."""
    return value == "true"


def or_none(value: Any) -> Any:
    return value if js_truthy(value) else None
