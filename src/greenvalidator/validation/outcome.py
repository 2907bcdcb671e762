"""
Validation outcome.

The value returned by ``Validator.execute()``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    """
    Result of one validation pass.

    Attributes:
        is_valid (bool): Whether every rule passed
        message (str): Empty when valid, otherwise every failure message
            joined by the validator's message separator, in the order the
            failures were recorded
    """

    is_valid: bool
    message: str = ""

    @property
    def failed(self) -> bool:
        """Whether any rule failed; always ``not is_valid``."""
        return not self.is_valid
