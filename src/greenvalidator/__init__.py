"""
GreenValidator - Declarative Data Validation

Attach a pipe-delimited rule-spec to each value and get back a pass/fail
verdict with readable failure messages:

    >>> from greenvalidator import Validator
    >>> outcome = Validator().validate({"invalid-email": "email"}).execute()
    >>> outcome.message
    'invalid-email is not a valid email'

The package provides:

- The rule-spec engine and its result type
- Direct access to every built-in predicate
- Configuration of message joining and regex limits
- Legacy class names for existing callers
"""

__version__ = "2.0.0"
__author__ = "GreenValidator Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("GreenValidator requires Python 3.9 or higher")

from .compat import GreenValidator, Validation
from .core.config import ValidatorConfig
from .core.exceptions import ConfigurationError, RequestFormatError, RuleSpecError
from .validation.engine import Validator
from .validation.outcome import Outcome
from .validation.reporter import OutcomeReporter

__all__ = [
    "Validator",
    "Outcome",
    "ValidatorConfig",
    "OutcomeReporter",
    "ConfigurationError",
    "RequestFormatError",
    "RuleSpecError",
    "GreenValidator",
    "Validation",
]
