"""
Validation Engine for GreenValidator

This module provides ``Validator``, which evaluates rule-specs against
subjects and accumulates failure messages:

    >>> result = Validator().validate({
    ...     "john.doe@example.com": "required|email",
    ...     "JohnDoe123": "required|alphanumeric|min:6|max:20",
    ... }).execute()
    >>> result.is_valid
    True

Every atom of every rule-spec is evaluated; a failing rule records a message
and evaluation continues. Messages accumulate across ``validate()`` calls on
the same instance until ``reset()`` is called, so reusing a validator for an
unrelated pass carries the earlier failures along.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Tuple, Union

from ..core.config import ValidatorConfig
from ..core.exceptions import RequestFormatError
from .outcome import Outcome
from .parser import RuleAtom, parse_rule_spec
from .rules import DEFAULT_REGISTRY

logger = logging.getLogger(__name__)

Requests = Union[Mapping, Iterable]


def _iter_requests(requests: Requests) -> List[Tuple[Any, Any]]:
    """Normalize a mapping or an iterable of pairs into a list of pairs."""
    if isinstance(requests, Mapping):
        return list(requests.items())
    if isinstance(requests, (str, bytes)) or not isinstance(requests, Iterable):
        raise RequestFormatError(
            f"requests must be a mapping or an iterable of pairs, got {type(requests).__name__}"
        )

    pairs = []
    for item in requests:
        if not isinstance(item, tuple) or len(item) != 2:
            raise RequestFormatError(f"expected a (subject, rule_spec) pair, got {item!r}")
        pairs.append(item)
    return pairs


class Validator:
    """
    Rule-spec evaluator with an accumulating error list.

    Attributes:
        config (ValidatorConfig): Reporting configuration
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """
        Initialize a validator with no recorded failures.

        Args:
            config: Optional configuration; defaults to ``ValidatorConfig()``
        """
        self.config = config or ValidatorConfig()
        self._registry = DEFAULT_REGISTRY
        self._errors: List[str] = []

    def validate(self, requests: Requests) -> "Validator":
        """
        Evaluate rule-specs against their subjects.

        Args:
            requests: Mapping of subject to rule-spec, or an iterable of
                ``(subject, rule_spec)`` pairs when one subject needs more
                than one entry

        Returns:
            Validator: This instance, for chaining into ``execute()``

        Raises:
            RequestFormatError: If ``requests`` is neither a mapping nor pairs
            RuleSpecError: If a rule-spec is not a string; nothing is
                recorded for the call in that case
        """
        parsed = [(subject, parse_rule_spec(rule_spec)) for subject, rule_spec in _iter_requests(requests)]
        logger.debug(f"Validating {len(parsed)} subject(s)")

        for subject, atoms in parsed:
            for atom in atoms:
                self._apply(subject, atom)
        return self

    def _apply(self, subject: Any, atom: RuleAtom) -> None:
        if atom.is_parameterized:
            rule = self._registry.parameterized(atom.name)
            if rule is None:
                logger.warning(f"Unknown validation rule: {atom.name}")
                self._errors.append(f"Unknown validation rule: {atom.name}")
                return
        else:
            rule = self._registry.simple(atom.name)
            if rule is None:
                if self.config.report_unknown_simple_rules:
                    self._errors.append(f"Unknown validation rule: {atom.name}")
                return

        message = rule.check(subject, atom.args, self.config)
        if message is not None:
            logger.debug(f"Rule {str(atom)!r} failed")
            self._errors.append(message)

    def execute(self) -> Outcome:
        """
        Build the outcome for everything recorded so far.

        Calling this repeatedly without validating again returns equal outcomes.
        """
        if self._errors:
            return Outcome(is_valid=False, message=self.config.message_separator.join(self._errors))
        return Outcome(is_valid=True, message="")

    def passes(self) -> bool:
        """Whether no failures have been recorded."""
        return not self._errors

    def fails(self) -> bool:
        """Whether any failure has been recorded."""
        return bool(self._errors)

    def get_errors(self) -> List[str]:
        """Return a copy of the recorded failure messages."""
        return list(self._errors)

    @property
    def errors(self) -> List[str]:
        return self.get_errors()

    def reset(self) -> "Validator":
        """Discard all recorded failures."""
        logger.debug(f"Discarding {len(self._errors)} recorded failure(s)")
        self._errors.clear()
        return self
