"""
Core components shared across GreenValidator: configuration and exceptions.
"""

from .config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_MAX_PATTERN_LENGTH,
    DEFAULT_MAX_REGEX_SUBJECT_LENGTH,
    DEFAULT_MESSAGE_SEPARATOR,
    DEFAULT_REGEX_TIMEOUT,
    ValidatorConfig,
)
from .exceptions import ConfigurationError, RequestFormatError, RuleSpecError

__all__ = [
    "ValidatorConfig",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_MESSAGE_SEPARATOR",
    "DEFAULT_MAX_PATTERN_LENGTH",
    "DEFAULT_MAX_REGEX_SUBJECT_LENGTH",
    "DEFAULT_REGEX_TIMEOUT",
    "ConfigurationError",
    "RequestFormatError",
    "RuleSpecError",
]
