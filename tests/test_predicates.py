"""
Tests for the built-in predicates.
"""

import logging
import time

import pytest

from greenvalidator import predicates


@pytest.mark.parametrize(
    "value, expected",
    [
        ("test@example.com", True),
        ("user.name@example.co.uk", True),
        ("invalid-email", False),
        ("no-at-sign.com", False),
        ("a@sub.example.test", True),
        ("user@localhost", False),
        ("user@test", False),
        ("user@example.invalid", False),
        ("two@@example.com", False),
        ("", False),
        (None, False),
        (42, False),
    ],
)
def test_is_email(value, expected):
    """Test email grammar."""
    assert predicates.is_email(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("123", True), ("0", True), (2019, True), ("12.34", False), ("abc", False), ("-1", False), ("", False), (True, False)],
)
def test_is_number(value, expected):
    """Test non-negative integer literals."""
    assert predicates.is_number(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3.14", True),
        ("0.5", True),
        ("123", True),
        ("-2.5e3", True),
        (1.5, True),
        ("abc", False),
        ("inf", False),
        ("nan", False),
        ("", False),
        (None, False),
    ],
)
def test_is_float(value, expected):
    """Test decimal number literals."""
    assert predicates.is_float(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("Hello World", True), ("Test123", True), ("test@example", False), ("test!", False), ("Hello\n", False)],
)
def test_is_string_only(value, expected):
    """Test letters, digits and spaces."""
    assert predicates.is_string_only(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("HelloWorld", True), ("Test String", True), ("Test123", False), ("test@example", False)],
)
def test_is_alpha(value, expected):
    """Test letters and spaces."""
    assert predicates.is_alpha(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("Test123", True), ("ABC", True), ("Test 123", False), ("test@example", False)],
)
def test_is_alphanumeric(value, expected):
    """Test letters and digits."""
    assert predicates.is_alphanumeric(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://example.com", True),
        ("http://www.example.com/path", True),
        ("https://example.com/path?query=value", True),
        ("http://127.0.0.1:8080/", True),
        ("mailto:someone@example.com", True),
        ("not a url", False),
        ("example.com", False),
        ("http://", False),
        ("http://example.com:notaport/", False),
        (None, False),
    ],
)
def test_is_url(value, expected):
    """Test absolute URLs."""
    assert predicates.is_url(value) is expected


def test_ip_families():
    """Test IP address literals of both families."""
    ipv4 = "192.168.1.1"
    ipv6 = "2001:0db8:85a3:0000:0000:8a2e:0370:7334"

    assert predicates.is_ip(ipv4)
    assert predicates.is_ip(ipv6)
    assert not predicates.is_ip("999.999.999.999")
    assert not predicates.is_ip("not an ip")

    assert predicates.is_ipv4("10.0.0.1")
    assert not predicates.is_ipv4(ipv6)
    assert not predicates.is_ipv4("999.999.999.999")

    assert predicates.is_ipv6("2001:db8::1")
    assert not predicates.is_ipv6(ipv4)
    assert not predicates.is_ipv6("not an ipv6")


def test_ip_rejects_non_strings_and_scopes():
    """Test integers and scoped IPv6 literals are not addresses."""
    assert not predicates.is_ip(3232235777)
    assert not predicates.is_ipv6("fe80::1%eth0")


@pytest.mark.parametrize(
    "value, expected",
    [
        ('{"name":"John","age":30}', True),
        ('["item1","item2"]', True),
        ("null", True),
        ("not json", False),
        ("{invalid json}", False),
        ("NaN", False),
        ("", False),
        (42, False),
    ],
)
def test_is_json(value, expected):
    """Test JSON documents."""
    assert predicates.is_json(value) is expected


def test_is_date_default_format():
    """Test dates in the default format."""
    assert predicates.is_date("2023-12-25")
    assert predicates.is_date("2024-01-01")
    assert not predicates.is_date("2023-13-32")
    assert not predicates.is_date("2023-02-30")
    assert not predicates.is_date("not a date")
    assert not predicates.is_date(20231225)


def test_is_date_custom_format():
    """Test dates in caller-supplied formats."""
    assert predicates.is_date("25/12/2023", "d/m/Y")
    assert predicates.is_date("12-25-2023", "m-d-Y")
    assert not predicates.is_date("2023-12-25", "d/m/Y")
    assert predicates.is_date("5/1/2023", "j/n/Y")
    assert not predicates.is_date("05/01/2023", "j/n/Y")
    assert predicates.is_date("2023-12-25", "%Y-%m-%d")


def test_is_date_unsupported_format():
    """Test formats with unknown letters never match."""
    assert not predicates.is_date("2023", "Q")


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, True),
        ("true", True),
        ("false", True),
        ("TRUE", True),
        ("1", True),
        ("0", True),
        (1, True),
        (0, True),
        (2, False),
        ("yes", False),
        ("not a boolean", False),
        (None, False),
    ],
)
def test_is_boolean(value, expected):
    """Test boolean-like values."""
    assert predicates.is_boolean(value) is expected


def test_matches_regex():
    """Test delimited and bare patterns."""
    assert predicates.matches_regex("ABC123", "/^[A-Z]{3}[0-9]{3}$/")
    assert predicates.matches_regex("test@example.com", r"/^[\w\.-]+@[\w\.-]+\.\w+$/")
    assert not predicates.matches_regex("abc123", "/^[A-Z]{3}[0-9]{3}$/")
    assert predicates.matches_regex("abc123", "/^[A-Z]{3}[0-9]{3}$/i")
    assert predicates.matches_regex(2023, r"^\d{4}$")
    assert predicates.matches_regex("xx42yy", "/[0-9]+/")


def test_matches_regex_invalid_pattern(caplog):
    """Test patterns that do not compile never match."""
    assert not predicates.matches_regex("x", "/(unclosed/")
    assert "Invalid regex pattern" in caplog.text


def test_matches_regex_length_caps():
    """Test oversized patterns and subjects are refused."""
    assert not predicates.matches_regex("abc", "/abc/", max_pattern_length=3)
    assert not predicates.matches_regex("a" * 20, "/a+/", max_subject_length=10)
    assert predicates.matches_regex("a" * 10, "/a+/", max_subject_length=10)


def test_matches_regex_catastrophic_backtracking_times_out():
    """Test a backtracking-heavy pattern is abandoned after the timeout."""
    started = time.monotonic()
    assert not predicates.matches_regex("a" * 40 + "!", "/^(a+)+$/", timeout=0.1)
    assert time.monotonic() - started < 5


def test_matches_regex_timeout_is_a_non_match(monkeypatch, caplog):
    """Test a search that raises TimeoutError counts as a failed match."""

    class SlowPattern:
        def search(self, text, timeout=None):
            raise TimeoutError("regex timed out")

    monkeypatch.setattr(predicates, "compile_pattern", lambda pattern: SlowPattern())
    with caplog.at_level(logging.WARNING, logger="greenvalidator.predicates"):
        assert not predicates.matches_regex("abc", "/abc/", timeout=0.25)
    assert "Regex pattern '/abc/' timed out after 0.25s" in caplog.text


def test_min_and_max_length():
    """Test length bounds on the text form."""
    assert predicates.min_length("Hello", 3)
    assert predicates.min_length("Hello", 5)
    assert not predicates.min_length("Hi", 3)

    assert predicates.max_length("Hello", 10)
    assert predicates.max_length("Hello", 5)
    assert not predicates.max_length("Hello World", 5)

    assert predicates.min_length(12345, 5)


@pytest.mark.parametrize(
    "value, expected",
    [("value", True), ("0", True), (0, True), (False, True), ("", False), ("   ", False), (None, False), ([], False), ({}, False), ([0], True)],
)
def test_is_required(value, expected):
    """Test presence of a value."""
    assert predicates.is_required(value) is expected


def test_is_in():
    """Test strict membership."""
    assert predicates.is_in("active", ["active", "inactive", "pending"])
    assert predicates.is_in("admin", ["admin", "user", "guest"])
    assert not predicates.is_in("superuser", ["admin", "user", "guest"])
    assert not predicates.is_in(1, ["1", "2"])
    assert not predicates.is_in(True, [1])


def test_is_between():
    """Test inclusive ranges."""
    assert predicates.is_between("25", 18, 65)
    assert predicates.is_between("18", 18, 65)
    assert predicates.is_between("65", 18, 65)
    assert not predicates.is_between("17", 18, 65)
    assert not predicates.is_between("66", 18, 65)
    assert predicates.is_between(" 3.14 ", 0, 10)
    assert not predicates.is_between("abc", 0, 10)
    assert not predicates.is_between(True, 0, 10)


def test_is_confirmed():
    """Test identical values."""
    assert predicates.is_confirmed("password", "password")
    assert predicates.is_confirmed("123", "123")
    assert not predicates.is_confirmed("password", "different")
    assert not predicates.is_confirmed("123", 123)
