"""
Legacy names.

Earlier releases exposed the engine as ``GreenValidator`` and the result as
``Validation``. Both remain importable as plain aliases of the current
classes.
"""

from .validation.engine import Validator
from .validation.outcome import Outcome

GreenValidator = Validator
Validation = Outcome

__all__ = ["GreenValidator", "Validation"]
