"""Rendering of scalar values (null, strings, numbers, booleans)."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    "\0": "\\0",
}


def is_primitive(value: Any) -> bool:
    """Check whether a value renders on a single line as a scalar."""
    return value is None or isinstance(value, (str, int, float))


def escape_string(value: str) -> str:
    """Escape backslashes, quotes and control characters.

    Common control characters use their two-character escapes; any other
    code point below 0x20, and 0x7F, becomes ``\\xHH``.
    """
    out: list[str] = []
    for ch in value:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
            continue
        code = ord(ch)
        if code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        else:
            out.append(ch)
    return "".join(out)


def format_string(value: str) -> str:
    """Render a string as a double-quoted, escaped literal."""
    return '"' + escape_string(value) + '"'


def format_number(value: int | float) -> str:
    """Render a number in canonical decimal form.

    Integral floats drop their fractional part and exponent notation is
    only used below 1e-6 or from 1e21 upwards, as JSON number text does.

    Examples:
        >>> format_number(30.0)
        '30'
        >>> format_number(0.00001)
        '0.00001'
        >>> format_number(1e21)
        '1e+21'
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, _, exponent = text.partition("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{exp:+d}"


def format_primitive(value: Any) -> str:
    """Render a scalar value.

    Args:
        value: None, a string, a number or a boolean.

    Returns:
        The single-line textual form of the value.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return format_string(value)
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
