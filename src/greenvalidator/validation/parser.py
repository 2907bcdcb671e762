"""
Rule-spec parsing.

A rule-spec is a pipe-delimited string of rule atoms. Each atom is either a
bare name (``email``) or ``name:args`` split on the first colon only, so
``regex:/^\\d{2}:\\d{2}$/`` keeps its inner colon. Atoms are not trimmed.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.exceptions import RuleSpecError

RULE_SEPARATOR = "|"
ARGS_SEPARATOR = ":"


@dataclass(frozen=True)
class RuleAtom:
    """
    One ``|``-separated segment of a rule-spec.

    Attributes:
        name (str): Rule name
        args (Optional[str]): Raw argument string, None for simple rules
    """

    name: str
    args: Optional[str] = None

    @property
    def is_parameterized(self) -> bool:
        return self.args is not None

    def __str__(self) -> str:
        if self.args is None:
            return self.name
        return f"{self.name}{ARGS_SEPARATOR}{self.args}"


def parse_atom(text: str) -> RuleAtom:
    """Parse a single atom such as ``"between:18,65"``."""
    if ARGS_SEPARATOR in text:
        name, args = text.split(ARGS_SEPARATOR, 1)
        return RuleAtom(name, args)
    return RuleAtom(text)


def parse_rule_spec(rule_spec: Any) -> List[RuleAtom]:
    """
    Parse a rule-spec into its atoms, in order.

    Args:
        rule_spec: Rule-spec such as ``"required|alphanumeric|min:6"``

    Returns:
        List[RuleAtom]: One atom per ``|``-separated segment, empty segments included

    Raises:
        RuleSpecError: If ``rule_spec`` is not a string
    """
    if not isinstance(rule_spec, str):
        raise RuleSpecError(f"rule spec must be a string, got {type(rule_spec).__name__}")
    return [parse_atom(segment) for segment in rule_spec.split(RULE_SEPARATOR)]
