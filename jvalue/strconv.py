"""Conversion between JSON real number text and floats."""

from __future__ import annotations

import math

__all__ = ["strtod", "dtostr"]


def strtod(text: str | bytes) -> float:
    """Parse number text into a float; raise OverflowError when out of range."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("ascii")
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"real number out of range: {text}")
    return value


def dtostr(value: float, precision: int = 0) -> str:
    """Format a float as JSON number text.

    A precision of 0 means 17 significant digits. The result always holds a
    '.' or an 'e', and its exponent carries no '+' and no leading zeros.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite real: {value}")
    if precision == 0:
        precision = 17

    text = "%.*g" % (precision, value)

    if "." not in text and "e" not in text:
        text += ".0"

    mantissa, sep, exponent = text.partition("e")
    if sep:
        sign = ""
        if exponent[:1] in "+-":
            sign = "-" if exponent[0] == "-" else ""
            exponent = exponent[1:]
        digits = exponent.lstrip("0") or "0"
        text = f"{mantissa}e{sign}{digits}"
    return text