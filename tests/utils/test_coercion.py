"""
Tests for subject coercion helpers.
"""

import pytest

from greenvalidator.utils.coercion import as_text, format_number, to_number


def test_as_text():
    """Test text forms of subjects."""
    assert as_text(None) == ""
    assert as_text(True) == "true"
    assert as_text(False) == "false"
    assert as_text(25) == "25"
    assert as_text("abc") == "abc"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12", 12.0),
        (" 12.5 ", 12.5),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        (7, 7.0),
        (2.5, 2.5),
        ("abc", None),
        ("", None),
        ("1_000", None),
        (True, None),
        (None, None),
        (10**400, None),
    ],
)
def test_to_number(value, expected):
    """Test numeric interpretation of subjects."""
    assert to_number(value) == expected


def test_format_number():
    """Test bounds render like the rule arguments were written."""
    assert format_number(100.0) == "100"
    assert format_number(-18.0) == "-18"
    assert format_number(2.5) == "2.5"
