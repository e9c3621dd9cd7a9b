"""
Typed value coercions.

Converts extracted field text into numbers and booleans. Integer widths are
the usual signed 16/32/64-bit ranges; float is checked against single
precision, double against the native float range.

Accepted number syntax:
- Integers: optional sign followed by ASCII digits ("42", "-7", "+0")
- Floats: decimal with optional exponent ("1.5", ".5", "3e-2"),
  plus the literals "NaN", "Infinity", "+Infinity" and "-Infinity"
"""

from __future__ import annotations

import math
import re
import struct

from .errors import InvalidBooleanError, NumericFormatError
from .models import Position

INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

SPECIAL_FLOATS = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

# name -> (min, max)
INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "short": (-(2**15), 2**15 - 1),
    "int": (-(2**31), 2**31 - 1),
    "long": (-(2**63), 2**63 - 1),
}

TRUE_LITERALS = frozenset({"true", "1"})
FALSE_LITERALS = frozenset({"false", "0"})


def parse_integer(text: str, width: str = "int", position: Position | None = None) -> int:
    """
    Parse a signed integer of the given width.

    Args:
        text: Trimmed field text
        width: One of "short", "int", "long"

    Returns:
        Parsed integer

    Raises:
        NumericFormatError: If the text is malformed or out of range
    """
    low, high = INTEGER_RANGES[width]

    if not INTEGER_PATTERN.match(text):
        raise NumericFormatError(text, width, position)

    value = int(text)
    if value < low or value > high:
        raise NumericFormatError(text, width, position)

    return value


def parse_float(text: str, width: str = "double", position: Position | None = None) -> float:
    """
    Parse a floating point number.

    Args:
        text: Trimmed field text
        width: "float" (single precision range) or "double"

    Returns:
        Parsed value

    Raises:
        NumericFormatError: If the text is malformed or overflows the width
    """
    if text in SPECIAL_FLOATS:
        return SPECIAL_FLOATS[text]

    if not FLOAT_PATTERN.match(text):
        raise NumericFormatError(text, width, position)

    value = float(text)
    if math.isinf(value):
        raise NumericFormatError(text, width, position)

    if width == "float":
        try:
            # Round-trip through single precision
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise NumericFormatError(text, width, position) from None

    return value


def parse_bool(text: str, position: Position | None = None) -> bool:
    """
    Parse a boolean literal (case-insensitive).

    "true"/"1" map to True, "false"/"0" map to False.

    Raises:
        InvalidBooleanError: For any other value
    """
    value = text.lower()
    if value in TRUE_LITERALS:
        return True
    if value in FALSE_LITERALS:
        return False
    raise InvalidBooleanError(text, position)
