"""
Date format handling for the ``date`` rule.

Formats use the token letters of the rule language (``Y-m-d``, ``d/m/Y``,
``j.n.y H:i``). A format is translated once into a ``strptime`` pattern for
parsing plus a list of formatters used to print the parsed value back, so a
date is only valid when printing it reproduces the input exactly. Formats
containing ``%`` are taken to be ``strptime`` formats already.
"""

from datetime import datetime
from functools import lru_cache
from typing import Callable, List, Tuple, Union

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _twelve_hour(dt: datetime) -> int:
    return dt.hour % 12 or 12


Formatter = Callable[[datetime], str]

_TOKENS = {
    "d": ("%d", lambda dt: f"{dt.day:02d}"),
    "j": ("%d", lambda dt: str(dt.day)),
    "m": ("%m", lambda dt: f"{dt.month:02d}"),
    "n": ("%m", lambda dt: str(dt.month)),
    "Y": ("%Y", lambda dt: f"{dt.year:04d}"),
    "y": ("%y", lambda dt: f"{dt.year % 100:02d}"),
    "H": ("%H", lambda dt: f"{dt.hour:02d}"),
    "G": ("%H", lambda dt: str(dt.hour)),
    "h": ("%I", lambda dt: f"{_twelve_hour(dt):02d}"),
    "g": ("%I", lambda dt: str(_twelve_hour(dt))),
    "i": ("%M", lambda dt: f"{dt.minute:02d}"),
    "s": ("%S", lambda dt: f"{dt.second:02d}"),
    "A": ("%p", lambda dt: "PM" if dt.hour >= 12 else "AM"),
    "a": ("%p", lambda dt: "pm" if dt.hour >= 12 else "am"),
    "D": ("%a", lambda dt: _DAY_NAMES[dt.weekday()][:3]),
    "l": ("%A", lambda dt: _DAY_NAMES[dt.weekday()]),
    "M": ("%b", lambda dt: _MONTH_NAMES[dt.month - 1][:3]),
    "F": ("%B", lambda dt: _MONTH_NAMES[dt.month - 1]),
}


@lru_cache(maxsize=128)
def translate_format(fmt: str) -> Tuple[str, Tuple[Union[str, Formatter], ...]]:
    """
    Translate a token format into a ``strptime`` pattern and its printers.

    Args:
        fmt: Token format such as ``"d/m/Y"`` with no ``%``; a backslash makes the next
            character literal

    Returns:
        Tuple of the ``strptime`` pattern and the sequence of literal strings
        and formatter callables that print a parsed date in the same format

    Raises:
        ValueError: If the format uses a letter with no supported meaning
    """
    pattern: List[str] = []
    printers: List[Union[str, Formatter]] = []
    escaped = False

    for char in fmt:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
            continue
        elif char in _TOKENS:
            directive, printer = _TOKENS[char]
            pattern.append(directive)
            printers.append(printer)
            continue
        elif char.isalpha():
            raise ValueError(f"Unsupported date format token: {char}")

        pattern.append(char)
        printers.append(char)

    return "".join(pattern), tuple(printers)


def parse_date(value: str, fmt: str) -> datetime:
    """
    Parse ``value`` strictly against ``fmt``.

    Raises:
        ValueError: If the value does not parse, or parses to a date that
            prints differently (``2023-02-30``, ``5`` for a zero-padded day)
    """
    if "%" in fmt:
        parsed = datetime.strptime(value, fmt)
        printed = parsed.strftime(fmt)
    else:
        pattern, printers = translate_format(fmt)
        parsed = datetime.strptime(value, pattern)
        printed = "".join(p if isinstance(p, str) else p(parsed) for p in printers)

    if printed != value:
        raise ValueError(f"{value!r} does not round-trip through format {fmt!r}")
    return parsed
