"""
Tests for regex pattern handling.
"""

import regex

import pytest

from greenvalidator.utils.patterns import compile_pattern, split_delimited


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("/abc/", ("abc", 0)),
        ("/abc/i", ("abc", regex.IGNORECASE)),
        ("#a/b#ms", ("a/b", regex.MULTILINE | regex.DOTALL)),
        ("{a+}", ("a+", 0)),
        ("<x>u", ("x", 0)),
        ("^abc$", ("^abc$", 0)),
        ("[a-z]+", ("[a-z]+", 0)),
        ("/abc/q", ("/abc/q", 0)),
        ("/", ("/", 0)),
    ],
)
def test_split_delimited(pattern, expected):
    """Test delimiter and flag extraction."""
    assert split_delimited(pattern) == expected


def test_compile_pattern_is_cached():
    """Test compiled patterns are reused."""
    assert compile_pattern("/x+/") is compile_pattern("/x+/")


def test_compile_pattern_error():
    """Test invalid bodies raise regex.error."""
    with pytest.raises(regex.error):
        compile_pattern("/(unclosed/")


def test_compiled_search_accepts_timeout():
    """Test compiled patterns support a bounded search."""
    compiled = compile_pattern("/^[a-z]+$/")
    assert compiled.search("abc", timeout=1.0) is not None
    assert compiled.search("ABC", timeout=1.0) is None
