"""
Unit tests for pattern validators.
Tests: validate_html_shape, validate_ipv4_literal, validate_ipv6_literal.
"""
import pytest

from fieldcheck.checks.patterns import (
    validate_html_shape,
    validate_ipv4_literal,
    validate_ipv6_literal,
)
from fieldcheck.models.outcome import FailureCategory


class TestHtmlShape:
    """Browser email input grammar."""

    @pytest.mark.parametrize(
        "address",
        [
            "valid.email@example.com",
            "user@localhost",
            "uses_a_forbidden_provider@yopmail.net",
            "a.b+tag@sub.example-mail.org",
            "x@" + "a" * 63 + ".com",
        ],
    )
    def test_accepted(self, address):
        assert validate_html_shape(address).ok

    @pytest.mark.parametrize(
        "address",
        [
            "plainaddress",
            "@example.com",
            "user@",
            "a@b@example.com",
            "user@-example.com",
            "user@example-.com",
            "user@example..com",
            "user@exa_mple.com",
            "josé@example.com",
            "user@exämple.com",
            "john doe@example.com",
            "x@" + "a" * 64 + ".com",
            '"john"@example.com',
        ],
    )
    def test_rejected(self, address):
        outcome = validate_html_shape(address)
        assert not outcome.ok
        assert outcome.reason.category == FailureCategory.NOT_HTML_SHAPE
        assert outcome.reason.message == "is not a valid email"

    def test_idempotent(self):
        assert validate_html_shape("a@b@c") == validate_html_shape("a@b@c")


class TestIPv4Literal:

    @pytest.mark.parametrize(
        "text",
        ["192.168.0.1", "0.0.0.0", "255.255.255.255", "01.2.3.4", "[10.0.0.1]"],
    )
    def test_accepted(self, text):
        assert validate_ipv4_literal(text) is True

    @pytest.mark.parametrize(
        "text",
        ["256.1.1.1", "1.2.3", "1.2.3.4.5", "1.2.3.a", "1..2.3", "", "1234.1.1.1", "[1.2.3.4"],
    )
    def test_rejected(self, text):
        assert validate_ipv4_literal(text) is False


class TestIPv6Literal:

    @pytest.mark.parametrize(
        "text",
        [
            "::1",
            "::",
            "1:2:3:4:5:6:7:8",
            "2001:0db8:0000:0000:0000:ff00:0042:8329",
            "2001:db8::ff00:42:8329",
            "1::",
            "1:2:3:4:5:6:7::",
            "::ffff:192.168.0.1",
            "64:ff9b::192.0.2.1",
            "fe80::1%eth0",
            "FE80::abcd%en0",
            "[::1]",
            "[2001:db8::1]",
        ],
    )
    def test_accepted(self, text):
        assert validate_ipv6_literal(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1:2:3:4:5:6:7",
            "1:2:3:4:5:6:7:8:9",
            "1::2::3",
            ":::",
            ":1:2",
            "12345::1",
            "g::1",
            "::ffff:999.1.1.1",
            "1.2.3.4",
            "2001:db8::1%eth0",
            "fe80::1%",
            "fe80::1%et-h0",
            "[]",
            "foo bar::1",
        ],
    )
    def test_rejected(self, text):
        assert validate_ipv6_literal(text) is False
