"""
Validation package for GreenValidator.

Key Components:
- Validator: Parses rule-specs, runs the built-in rules and accumulates failures
- Outcome: Result of a validation pass
- RuleRegistry: Lookup table of built-in rules
- OutcomeReporter: Formats outcomes as text, dictionaries or JSON
"""

from .engine import Validator
from .outcome import Outcome
from .parser import RuleAtom, parse_rule_spec
from .reporter import OutcomeReporter
from .rules import DEFAULT_REGISTRY, RuleRegistry, ValidationRule

__all__ = [
    "Validator",
    "Outcome",
    "RuleAtom",
    "parse_rule_spec",
    "OutcomeReporter",
    "RuleRegistry",
    "ValidationRule",
    "DEFAULT_REGISTRY",
]
