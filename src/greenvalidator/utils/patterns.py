"""
Pattern handling for the ``regex`` rule.

Patterns arrive as the verbatim argument of ``regex:...`` and may be wrapped
in delimiters with trailing flags (``/^[a-z]+$/i``). A pattern without a
recognised delimiter is compiled as written.

Patterns are compiled with the ``regex`` package rather than ``re`` because
its ``search`` accepts a ``timeout``, which bounds catastrophic backtracking.
"""

import logging
from functools import lru_cache
from typing import Any, Tuple

import regex

logger = logging.getLogger(__name__)

# "(" and "[" open groups and classes far more often than they delimit.
_DELIMITERS = {"/": "/", "#": "#", "~": "~", "!": "!", "@": "@", "%": "%", ";": ";", ",": ",", "`": "`", "{": "}", "<": ">"}

_FLAGS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
    "x": regex.VERBOSE,
    "u": 0,
}


def split_delimited(pattern: str) -> Tuple[str, int]:
    """
    Strip delimiters and trailing flags from a pattern.

    Args:
        pattern: Raw pattern, e.g. ``"/^abc$/i"`` or ``"^abc$"``

    Returns:
        Tuple of the pattern body and the ``regex`` flags to compile it with.
        Patterns without a recognised delimiter come back unchanged with no flags.
    """
    if len(pattern) < 2 or pattern[0] not in _DELIMITERS:
        return pattern, 0

    closing = _DELIMITERS[pattern[0]]
    end = pattern.rfind(closing)
    if end <= 0:
        return pattern, 0

    modifiers = pattern[end + 1 :]
    if any(m not in _FLAGS for m in modifiers):
        return pattern, 0

    flags = 0
    for modifier in modifiers:
        flags |= _FLAGS[modifier]
    return pattern[1:end], flags


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Any:
    """
    Compile a raw rule pattern, caching the result.

    Raises:
        regex.error: If the pattern body is not a valid regular expression
    """
    body, flags = split_delimited(pattern)
    logger.debug(f"Compiling pattern {pattern!r}")
    return regex.compile(body, flags)
