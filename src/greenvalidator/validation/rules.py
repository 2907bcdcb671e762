"""
Built-in Rule Table for GreenValidator

This module maps rule names from the rule language to rule objects. Each rule
object pairs a predicate from ``greenvalidator.predicates`` with the message
recorded when the predicate fails.

Rules come in two kinds:
- Simple rules, written as a bare name (``email``, ``required``)
- Parameterized rules, written as ``name:args`` (``min:6``, ``between:18,65``)

The same name may exist in both tables with different behaviour; ``date`` is
the only such name among the built-ins.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .. import predicates
from ..core.config import ValidatorConfig
from ..utils.coercion import as_text, format_number

logger = logging.getLogger(__name__)


class ValidationRule:
    """
    Base class for all built-in rules.

    Subclasses override ``check()``. A rule never raises for bad subject data
    or malformed arguments; it reports either as a message.

    Attributes:
        name (str): Name of the rule in the rule language
        message (str): Failure message template; ``{subject}`` is replaced with
            the text form of the subject
    """

    def __init__(self, name: str, message: str):
        """
        Initialize a rule.

        Args:
            name: Name of the rule in the rule language
            message: Message template used when the rule fails
        """
        self.name = name
        self.message = message

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        """
        Check a subject against the rule.

        Args:
            subject: Value being validated
            args: Raw argument string for parameterized rules, None for simple rules
            config: Configuration of the calling validator

        Returns:
            Optional[str]: The failure message, or None if the subject passes

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement check()")

    def format_message(self, subject: Any, **values: Any) -> str:
        """Fill the message template for a failing subject."""
        return self.message.format(subject=as_text(subject), **values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PredicateRule(ValidationRule):
    """Simple rule backed by a single-argument predicate."""

    def __init__(self, name: str, predicate: Callable[[Any], bool], message: str):
        super().__init__(name, message)
        self.predicate = predicate

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        if self.predicate(subject):
            return None
        return self.format_message(subject)


class DateRule(ValidationRule):
    """
    Date rule, simple or parameterized.

    As a simple rule the format comes from ``config.default_date_format``; as a
    parameterized rule the argument string is the format.
    """

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        fmt = config.default_date_format if args is None else args
        if predicates.is_date(subject, fmt):
            return None
        return self.format_message(subject, format=fmt)


class LengthRule(ValidationRule):
    """
    Length bound on the text form of a subject (``min:N`` and ``max:N``).

    Attributes:
        predicate: ``predicates.min_length`` or ``predicates.max_length``
    """

    def __init__(self, name: str, predicate: Callable[[Any, int], bool], message: str):
        super().__init__(name, message)
        self.predicate = predicate

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        try:
            bound = int(args or "")
        except ValueError:
            logger.warning(f"Malformed {self.name} rule arguments: {args!r}")
            return f"Invalid {self.name} rule format"
        if self.predicate(subject, bound):
            return None
        return self.format_message(subject, args=args)


class BetweenRule(ValidationRule):
    """
    Inclusive numeric range, written ``between:low,high``.

    Arguments that are not exactly two numbers produce
    ``"Invalid between rule format"`` instead of a range failure.
    """

    FORMAT_ERROR = "Invalid between rule format"

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        bounds = (args or "").split(",")
        if len(bounds) != 2:
            logger.warning(f"Malformed between rule arguments: {args!r}")
            return self.FORMAT_ERROR
        try:
            low, high = float(bounds[0].strip()), float(bounds[1].strip())
        except ValueError:
            logger.warning(f"Non-numeric between rule bounds: {args!r}")
            return self.FORMAT_ERROR

        if predicates.is_between(subject, low, high):
            return None
        return self.format_message(subject, low=format_number(low), high=format_number(high))


class InRule(ValidationRule):
    """Membership in a comma-separated list, written ``in:a,b,c``."""

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        allowed = [item.strip() for item in (args or "").split(",")]
        if predicates.is_in(subject, allowed):
            return None
        return self.format_message(subject, allowed=", ".join(allowed))


class RegexRule(ValidationRule):
    """Pattern match, written ``regex:/pattern/flags``."""

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        matched = predicates.matches_regex(
            subject,
            args or "",
            max_pattern_length=config.max_pattern_length,
            max_subject_length=config.max_regex_subject_length,
            timeout=config.regex_timeout,
        )
        if matched:
            return None
        return self.format_message(subject)


class NoOpRule(ValidationRule):
    """
    Rule that always passes.

    Used for ``confirmed``, which needs a second value to compare against and
    so cannot be expressed with one subject per rule-spec. Use
    ``predicates.is_confirmed`` to compare two values directly.
    """

    def __init__(self, name: str):
        super().__init__(name, "")

    def check(self, subject: Any, args: Optional[str], config: ValidatorConfig) -> Optional[str]:
        return None


class RuleRegistry:
    """
    Lookup table from rule names to rule objects.

    Simple and parameterized rules live in separate tables, so one name can
    mean different things with and without arguments.
    """

    def __init__(self):
        self._simple: Dict[str, ValidationRule] = {}
        self._parameterized: Dict[str, ValidationRule] = {}

    def _add_simple(self, rule: ValidationRule) -> None:
        self._simple[rule.name] = rule

    def _add_parameterized(self, rule: ValidationRule) -> None:
        self._parameterized[rule.name] = rule

    def simple(self, name: str) -> Optional[ValidationRule]:
        """Return the simple rule called ``name``, or None."""
        return self._simple.get(name)

    def parameterized(self, name: str) -> Optional[ValidationRule]:
        """Return the parameterized rule called ``name``, or None."""
        return self._parameterized.get(name)

    def simple_names(self) -> List[str]:
        """Names of all simple rules, in registration order."""
        return list(self._simple)

    def parameterized_names(self) -> List[str]:
        """Names of all parameterized rules, in registration order."""
        return list(self._parameterized)

    def is_known(self, name: str) -> bool:
        """Whether ``name`` is a rule of either kind."""
        return name in self._simple or name in self._parameterized


def build_default_registry() -> RuleRegistry:
    """Build the registry holding every built-in rule."""
    registry = RuleRegistry()

    simple_rules = [
        ("email", predicates.is_email, "{subject} is not a valid email"),
        ("string", predicates.is_string_only, "{subject} is not a valid string"),
        ("number", predicates.is_number, "{subject} is not a valid number"),
        ("float", predicates.is_float, "{subject} is not a valid float"),
        ("alpha", predicates.is_alpha, "{subject} must contain only letters"),
        ("alphanumeric", predicates.is_alphanumeric, "{subject} must be alphanumeric"),
        ("url", predicates.is_url, "{subject} is not a valid URL"),
        ("ip", predicates.is_ip, "{subject} is not a valid IP address"),
        ("ipv4", predicates.is_ipv4, "{subject} is not a valid IPv4 address"),
        ("ipv6", predicates.is_ipv6, "{subject} is not a valid IPv6 address"),
        ("json", predicates.is_json, "{subject} is not valid JSON"),
    ]
    for name, predicate, message in simple_rules:
        registry._add_simple(PredicateRule(name, predicate, message))
    registry._add_simple(DateRule("date", "{subject} is not a valid date"))
    registry._add_simple(PredicateRule("boolean", predicates.is_boolean, "{subject} is not a valid boolean"))
    registry._add_simple(PredicateRule("required", predicates.is_required, "{subject} is required"))

    registry._add_parameterized(
        LengthRule("min", predicates.min_length, "{subject} must be at least {args} characters")
    )
    registry._add_parameterized(
        LengthRule("max", predicates.max_length, "{subject} must be at most {args} characters")
    )
    registry._add_parameterized(BetweenRule("between", "{subject} must be between {low} and {high}"))
    registry._add_parameterized(InRule("in", "{subject} must be one of: {allowed}"))
    registry._add_parameterized(RegexRule("regex", "{subject} does not match required pattern"))
    registry._add_parameterized(DateRule("date", "{subject} is not a valid date with format {format}"))
    registry._add_parameterized(NoOpRule("confirmed"))

    return registry


DEFAULT_REGISTRY = build_default_registry()
