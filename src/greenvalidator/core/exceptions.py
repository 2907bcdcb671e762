"""
Custom exceptions for the GreenValidator library.

This module defines the exceptions raised when the library is *called*
incorrectly. A value that fails a rule is never an exception: it is recorded
as a message on the validator. The classes below cover the remaining cases,
where the request itself cannot be interpreted.
"""


class RuleSpecError(TypeError):
    """
    Raised when a rule-spec is not a string.

    Rule-specs are pipe-delimited strings such as ``"required|min:3"``. Any
    other type attached to a subject is a programming error in the caller.

    Examples:
        * ``{"value": None}``
        * ``{"value": ["required", "email"]}``
    """

    def __str__(self) -> str:
        """Format rule-spec error message."""
        return f"Rule Spec Error: {super().__str__()}"


class RequestFormatError(TypeError):
    """
    Raised when a validation request has an unusable shape.

    ``validate()`` accepts a mapping of subject to rule-spec or an iterable of
    ``(subject, rule_spec)`` pairs. Anything else raises this error.

    Examples:
        * A bare string passed instead of a mapping
        * A sequence containing triples instead of pairs
    """


class ConfigurationError(ValueError):
    """
    Raised when configuration is invalid.

    This exception is raised when a ``ValidatorConfig`` is built with values
    that cannot work, or from a mapping carrying unknown settings.

    Examples:
        * Empty date format
        * Negative regex length caps
        * Unknown configuration keys
    """
