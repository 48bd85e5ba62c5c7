"""Conversion between real numbers and their JSON text form."""

from __future__ import annotations

import math
import re

_EXPONENT = re.compile(r"e([+-]?)(\d*)")


def parse_real(text: str | bytes) -> float:
    """Parse JSON number text as a float.

    Raises ValueError for text that is not a number and OverflowError when
    the magnitude is too large to represent.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii")
    stripped = text.strip()
    if stripped.lower().lstrip("+-") in ("inf", "infinity", "nan"):
        raise ValueError(f"not a number: {text!r}")
    value = float(stripped)
    if math.isinf(value):
        raise OverflowError(f"real number overflow: {text!r}")
    return value


def _trim_exponent(match: re.Match[str]) -> str:
    sign = "-" if match.group(1) == "-" else ""
    return "e" + sign + match.group(2).lstrip("0")


def format_real(value: float, precision: int, fractional_digits: bool) -> str:
    """Format a real so that it reads back as a real.

    A precision of 0 means 17 significant digits. With fractional_digits set,
    precision counts digits after the decimal point instead.
    """
    if precision == 0:
        precision = 17
    text = ("%.*f" if fractional_digits else "%.*g") % (precision, value)

    # Without a dot or exponent the text would decode as an integer.
    if "." not in text and "e" not in text:
        text += ".0"

    # Drop a '+' and leading zeros from the exponent.
    return _EXPONENT.sub(_trim_exponent, text, count=1)