"""
Validator configuration.

Holds the knobs that change how a ``Validator`` reports results without
changing the rule language itself.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from .exceptions import ConfigurationError

DEFAULT_MESSAGE_SEPARATOR = "<br>"
DEFAULT_DATE_FORMAT = "Y-m-d"
DEFAULT_MAX_PATTERN_LENGTH = 1000
DEFAULT_MAX_REGEX_SUBJECT_LENGTH = 10000
DEFAULT_REGEX_TIMEOUT = 0.5


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Configuration for a validator instance.

    Attributes:
        message_separator: String placed between messages in ``Outcome.message``
        default_date_format: Format used by the parameterless ``date`` rule
        report_unknown_simple_rules: Report unknown simple rule names as errors
            instead of ignoring them
        max_pattern_length: Regex patterns longer than this never match
        max_regex_subject_length: Subjects longer than this never match a regex
        regex_timeout: Seconds a single regex search may run before it counts
            as a non-match
    """

    message_separator: str = DEFAULT_MESSAGE_SEPARATOR
    default_date_format: str = DEFAULT_DATE_FORMAT
    report_unknown_simple_rules: bool = False
    max_pattern_length: int = DEFAULT_MAX_PATTERN_LENGTH
    max_regex_subject_length: int = DEFAULT_MAX_REGEX_SUBJECT_LENGTH
    regex_timeout: float = DEFAULT_REGEX_TIMEOUT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.message_separator, str):
            raise ConfigurationError("message_separator must be a string")
        if not isinstance(self.default_date_format, str) or not self.default_date_format:
            raise ConfigurationError("default_date_format must be a non-empty string")
        if not isinstance(self.report_unknown_simple_rules, bool):
            raise ConfigurationError("report_unknown_simple_rules must be a boolean")
        for name in ("max_pattern_length", "max_regex_subject_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer")
        timeout = self.regex_timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not 0 < timeout < math.inf:
            raise ConfigurationError("regex_timeout must be a positive number of seconds")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidatorConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            data: Setting names mapped to values; missing names keep defaults

        Returns:
            ValidatorConfig: The validated configuration

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
