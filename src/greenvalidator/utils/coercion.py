"""
Conversions between raw subjects, their text form and numbers.

Rules compare lengths, patterns and ranges against the *text form* of a
subject, and messages embed that same text form, so every rule goes through
``as_text`` rather than calling ``str`` directly.
"""

import re
from typing import Any, Optional

# Leading/trailing blanks, optional sign, digits with optional fraction, optional exponent.
_NUMERIC_STRING = re.compile(r"[ \t\n\r\v\f]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)[ \t\n\r\v\f]*")


def as_text(value: Any) -> str:
    """
    Return the text form of a subject.

    ``None`` becomes the empty string and booleans become ``"true"`` or
    ``"false"``; everything else goes through ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """
    Interpret a subject as a number.

    Args:
        value: Subject to interpret

    Returns:
        Optional[float]: The numeric value, or None if the subject is not numeric.
            Booleans and integers too large for a float are never numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        match = _NUMERIC_STRING.fullmatch(value)
        if match:
            return float(match.group(1))
    return None


def format_number(number: float) -> str:
    """Format a bound for messages: ``100.0`` reads ``100``, ``2.5`` stays ``2.5``."""
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return repr(number)
