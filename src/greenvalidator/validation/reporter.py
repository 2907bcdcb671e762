"""
Outcome Reporter Components for GreenValidator

This module formats validation outcomes for people and for other programs:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict, Sequence

from ..core.config import DEFAULT_MESSAGE_SEPARATOR
from .outcome import Outcome


class OutcomeReporter:
    """
    Reporter for formatting and outputting validation outcomes.

    All methods are static; the reporter holds no state.
    """

    @staticmethod
    def format_errors(errors: Sequence[str]) -> str:
        """
        Format a list of failure messages as a human-readable string.

        Args:
            errors: Messages as returned by ``Validator.get_errors()``

        Returns:
            str: Formatted report

        Example:
            >>> print(OutcomeReporter.format_errors(["abc is not a valid number"]))
            Validation failed with the following errors:
              - abc is not a valid number
        """
        if not errors:
            return "Validation passed successfully"

        lines = ["Validation failed with the following errors:"]
        for error in errors:
            lines.append(f"  - {error}")
        return "\n".join(lines)

    @staticmethod
    def format_outcome(outcome: Outcome, separator: str = DEFAULT_MESSAGE_SEPARATOR) -> str:
        """
        Format an outcome as a human-readable string.

        The outcome message is split back into individual failures on
        ``separator``, which must match the separator the validator used.

        Args:
            outcome: Outcome to format
            separator: Separator used to join the outcome message

        Returns:
            str: Formatted report
        """
        if outcome.is_valid:
            return OutcomeReporter.format_errors([])
        return OutcomeReporter.format_errors(outcome.message.split(separator))

    @staticmethod
    def to_dict(outcome: Outcome) -> Dict[str, Any]:
        """
        Convert an outcome to a dictionary.

        Example:
            >>> OutcomeReporter.to_dict(Outcome(True))
            {'is_valid': True, 'failed': False, 'message': ''}
        """
        return {
            "is_valid": outcome.is_valid,
            "failed": outcome.failed,
            "message": outcome.message,
        }

    @staticmethod
    def to_json(outcome: Outcome) -> str:
        """Serialize an outcome to an indented JSON string."""
        return json.dumps(OutcomeReporter.to_dict(outcome), indent=2)
