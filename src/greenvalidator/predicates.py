"""
Built-in predicates for GreenValidator.

Each function takes a subject (and, for parameterized checks, the parsed
arguments) and returns a plain boolean. The rule table in
``greenvalidator.validation.rules`` wraps these with names and messages; they
are also public so callers can run a single check directly:

    >>> from greenvalidator import predicates
    >>> predicates.is_between("25", 18, 65)
    True
    >>> predicates.min_length("Hi", 3)
    False

None of the predicates raise for bad input; a subject that cannot be
interpreted simply fails the check.
"""

import ipaddress
import json
import logging
import math
import re
from collections.abc import Sized
from typing import Any, Iterable, Optional
from urllib.parse import urlsplit

import regex
from email_validator import EmailNotValidError, validate_email

from .core.config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_MAX_PATTERN_LENGTH,
    DEFAULT_MAX_REGEX_SUBJECT_LENGTH,
    DEFAULT_REGEX_TIMEOUT,
)
from .utils.coercion import as_text, to_number
from .utils.dates import parse_date
from .utils.patterns import compile_pattern

logger = logging.getLogger(__name__)

_STRING_ONLY = re.compile(r"[a-zA-Z0-9 ]+")
_ALPHA = re.compile(r"[a-zA-Z ]+")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
_DIGITS = re.compile(r"[0-9]+")
_URL_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")

# Schemes whose URLs carry no host, e.g. mailto:someone@example.com
_HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})

_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


def is_email(value: Any) -> bool:
    """
    Check that a value is an email address.

    The address grammar is checked offline; no DNS lookups are made. The
    domain part must contain at least one dot. Addresses under the ``.test``
    domain are accepted; other special-use names such as ``localhost`` and
    ``.invalid`` are rejected by email-validator.
    """
    if not isinstance(value, str):
        return False
    try:
        info = validate_email(
            value,
            check_deliverability=False,
            test_environment=True,
            allow_smtputf8=False,
        )
    except EmailNotValidError:
        return False
    # test_environment also admits a bare "@test" domain.
    return "." in info.ascii_domain


def is_string_only(value: Any) -> bool:
    """Letters, digits and spaces only."""
    return _STRING_ONLY.fullmatch(as_text(value)) is not None


def is_number(value: Any) -> bool:
    """Non-negative integer literal: digits only, no sign, no decimal point."""
    return _DIGITS.fullmatch(as_text(value)) is not None


def is_float(value: Any) -> bool:
    """Finite decimal number; integers qualify."""
    number = to_number(value)
    return number is not None and math.isfinite(number)


def is_alpha(value: Any) -> bool:
    """Letters and spaces only."""
    return _ALPHA.fullmatch(as_text(value)) is not None


def is_alphanumeric(value: Any) -> bool:
    """Letters and digits only, no spaces."""
    return _ALPHANUMERIC.fullmatch(as_text(value)) is not None


def is_url(value: Any) -> bool:
    """
    Check that a value is an absolute URL.

    A scheme is required, and apart from ``mailto``, ``news`` and ``file``
    URLs, so is a host. Whitespace and non-ASCII characters are rejected.
    """
    if not isinstance(value, str) or not value.isascii():
        return False
    if any(char.isspace() or not char.isprintable() for char in value):
        return False

    try:
        parts = urlsplit(value)
        if not _URL_SCHEME.fullmatch(parts.scheme):
            return False
        if parts.scheme.lower() in _HOSTLESS_SCHEMES:
            return bool(parts.netloc or parts.path)
        # Accessing the port validates it.
        parts.port
    except ValueError:
        return False
    return bool(parts.hostname)


def _ip_version(value: Any) -> Optional[int]:
    if not isinstance(value, str) or "%" in value:
        return None
    try:
        return ipaddress.ip_address(value).version
    except ValueError:
        return None


def is_ip(value: Any) -> bool:
    """IPv4 or IPv6 address literal."""
    return _ip_version(value) is not None


def is_ipv4(value: Any) -> bool:
    """IPv4 address literal."""
    return _ip_version(value) == 4


def is_ipv6(value: Any) -> bool:
    """IPv6 address literal."""
    return _ip_version(value) == 6


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def is_json(value: Any) -> bool:
    """
    Check that a value is a string holding valid JSON.

    ``NaN`` and ``Infinity`` are not JSON and are rejected.
    """
    if not isinstance(value, str):
        return False
    try:
        json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def is_date(value: Any, fmt: str = DEFAULT_DATE_FORMAT) -> bool:
    """
    Check that a string is a date in the given format.

    Args:
        value: Subject to check; non-strings always fail
        fmt: Token format (``"Y-m-d"``, ``"d/m/Y"``) or a ``strptime`` format

    Returns:
        bool: True if the value parses and prints back unchanged
    """
    if not isinstance(value, str):
        return False
    try:
        parse_date(value, fmt)
    except ValueError:
        return False
    return True


def is_boolean(value: Any) -> bool:
    """True/False, ``1``/``0``, or one of ``"true"``, ``"false"``, ``"1"``, ``"0"`` in any case."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    if isinstance(value, str):
        return value.strip().lower() in _BOOLEAN_STRINGS
    return False


def matches_regex(
    value: Any,
    pattern: str,
    max_pattern_length: int = DEFAULT_MAX_PATTERN_LENGTH,
    max_subject_length: int = DEFAULT_MAX_REGEX_SUBJECT_LENGTH,
    timeout: float = DEFAULT_REGEX_TIMEOUT,
) -> bool:
    """
    Check that the text form of a value matches a pattern.

    The pattern may be delimited (``/^[A-Z]{3}$/i``) or bare. The match is a
    search, so it is only anchored where the pattern anchors itself.

    Args:
        value: Subject to check
        pattern: Raw pattern
        max_pattern_length: Longer patterns are refused
        max_subject_length: Longer subjects are refused
        timeout: Seconds the search may run before it is abandoned

    Returns:
        bool: True if the pattern is found. Refused inputs, patterns that do
            not compile and searches that time out never match.
    """
    text = as_text(value)
    if len(pattern) > max_pattern_length:
        logger.warning(f"Refusing regex pattern of length {len(pattern)} (limit {max_pattern_length})")
        return False
    if len(text) > max_subject_length:
        logger.warning(f"Refusing regex subject of length {len(text)} (limit {max_subject_length})")
        return False

    try:
        compiled = compile_pattern(pattern)
    except regex.error as e:
        logger.warning(f"Invalid regex pattern {pattern!r}: {str(e)}")
        return False

    try:
        return compiled.search(text, timeout=timeout) is not None
    except TimeoutError:
        logger.warning(f"Regex pattern {pattern!r} timed out after {timeout}s")
        return False


def max_length(value: Any, maximum: int) -> bool:
    """Text form is at most ``maximum`` characters long."""
    return len(as_text(value)) <= maximum


def min_length(value: Any, minimum: int) -> bool:
    """Text form is at least ``minimum`` characters long."""
    return len(as_text(value)) >= minimum


def is_required(value: Any) -> bool:
    """
    Check that a value is present.

    ``None``, blank strings and empty collections are missing; anything else,
    including ``"0"``, ``0`` and ``False``, is present.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def is_in(value: Any, allowed: Iterable[Any]) -> bool:
    """Value equals one of ``allowed`` with the same type (``"1"`` is not ``1``)."""
    return any(type(value) is type(item) and value == item for item in allowed)


def is_between(value: Any, minimum: float, maximum: float) -> bool:
    """Value is numeric and within ``[minimum, maximum]``."""
    number = to_number(value)
    return number is not None and minimum <= number <= maximum


def is_confirmed(value: Any, confirmation: Any) -> bool:
    """Value and its confirmation are identical in type and content."""
    return type(value) is type(confirmation) and value == confirmation
