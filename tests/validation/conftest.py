"""Shared test fixtures."""

import pytest

from greenvalidator.core.config import ValidatorConfig
from greenvalidator.validation.engine import Validator


@pytest.fixture
def validator() -> Validator:
    """Fixture providing a validator with default configuration."""
    return Validator()


@pytest.fixture
def default_config() -> ValidatorConfig:
    """Fixture providing the default configuration."""
    return ValidatorConfig()
