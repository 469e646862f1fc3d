"""Loose conversions of script values to strings, booleans and numbers.

The ``try_*`` functions raise :class:`ConversionError` when a value cannot be
converted; the plain ``to_*`` functions return the zero value instead.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_FALSE_WORDS = frozenset({"0", "f", "F", "false", "FALSE", "False"})
_HEX_FLOAT = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+")
_INT_PATTERNS = {10: re.compile(r"[+-]?[0-9]+"), 16: re.compile(r"[+-]?[0-9a-fA-F]+")}


class ConversionError(ValueError):
    """Raised when a value cannot be converted to the requested type."""


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    shortest = Decimal(repr(number)).normalize()
    exponent = shortest.adjusted()
    if exponent < -4 or exponent >= 21:
        mantissa, _, exp = f"{shortest:e}".partition("e")
        return f"{mantissa}e{int(exp):+03d}"
    return f"{shortest:f}"


def _key_order(item: tuple[Any, Any]) -> tuple[int, Any]:
    key = item[0]
    if key is None:
        return (0, 0)
    if isinstance(key, (bool, int, float)):
        return (1, key)
    if isinstance(key, str):
        return (2, key)
    return (3, _format(key))


def _format(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, (bytes, bytearray, list, tuple)):
        return "[" + " ".join(_format(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=_key_order)
        return "map[" + " ".join(f"{_format(k)}:{_format(v)}" for k, v in items) + "]"
    return str(value)


def to_string(value: Any) -> str:
    """Return the textual form of ``value``; strings are returned unchanged."""
    return _format(value)


def try_to_bool(value: Any) -> bool:
    """Convert ``value`` to a boolean or raise :class:`ConversionError`.

    A string is true when it is non-empty, is not one of the false spellings
    and does not parse as the number zero.
    """
    if isinstance(value, (bool, int, float)):
        return value != 0
    if isinstance(value, str):
        if not value or value in _FALSE_WORDS:
            return False
        return to_float64(value) != 0 or _float_or_none(value) is None
    if isinstance(value, (list, tuple, dict, set, frozenset, bytes, bytearray)):
        return len(value) > 0
    raise ConversionError("unknown type")


def _float_or_none(text: str) -> float | None:
    try:
        return try_to_float64(text)
    except ConversionError:
        return None


def to_bool(value: Any) -> bool:
    """Convert ``value`` to a boolean, returning False when it cannot."""
    try:
        return try_to_bool(value)
    except ConversionError:
        return False


def _parse_float(text: str) -> float:
    if not text.isascii() or "_" in text or text != text.strip():
        raise ConversionError("couldn't convert to a float64")
    try:
        result = float(text)
    except ValueError:
        if not _HEX_FLOAT.fullmatch(text):
            raise ConversionError("couldn't convert to a float64") from None
        result = float.fromhex(text)
    if math.isinf(result) and "inf" not in text.lower():
        raise ConversionError("couldn't convert to a float64")
    return result


def try_to_float64(value: Any) -> float:
    """Convert ``value`` to a float or raise :class:`ConversionError`."""
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        return _parse_float(value)
    raise ConversionError("couldn't convert to a float64")


def to_float64(value: Any) -> float:
    """Convert ``value`` to a float, returning 0.0 when it cannot."""
    try:
        return try_to_float64(value)
    except ConversionError:
        return 0.0


def _float_to_int64(number: float) -> int:
    if not math.isfinite(number):
        return INT64_MIN
    truncated = int(number)
    return truncated if INT64_MIN <= truncated <= INT64_MAX else INT64_MIN


def _parse_int(text: str) -> int:
    base = 16 if text.startswith("0x") else 10
    if not _INT_PATTERNS[base].fullmatch(text):
        raise ConversionError("couldn't convert to integer")
    number = int(text, base)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ConversionError("couldn't convert to integer")
    return number


def try_to_int64(value: Any) -> int:
    """Convert ``value`` to a 64-bit integer or raise :class:`ConversionError`.

    Floats are truncated toward zero. Strings starting with ``0x`` are read
    as base 16 digits, so the ``x`` itself makes them invalid.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        return _float_to_int64(value)
    if isinstance(value, int):
        return ((value - INT64_MIN) % (1 << 64)) + INT64_MIN
    if isinstance(value, str):
        return _parse_int(value)
    raise ConversionError("couldn't convert to integer")


def to_int64(value: Any) -> int:
    """Convert ``value`` to a 64-bit integer, returning 0 when it cannot."""
    try:
        return try_to_int64(value)
    except ConversionError:
        return 0


def try_to_int(value: Any) -> int:
    """Convert ``value`` to a machine integer or raise :class:`ConversionError`."""
    return try_to_int64(value)


def to_int(value: Any) -> int:
    """Convert ``value`` to a machine integer, returning 0 when it cannot."""
    return to_int64(value)