"""
Unit tests for the pow email grammar.
Tests: split_address, strip_quoted_segments, validate_domain, validate_pow.
"""
import pytest

from fieldcheck.checks.email_grammar import (
    is_fully_quoted,
    split_address,
    strip_quoted_segments,
    validate_domain,
    validate_pow,
)
from fieldcheck.models.outcome import FailureCategory


def category(outcome):
    return outcome.reason.category if outcome.reason else None


class TestSplitAddress:
    """Split on the last @."""

    def test_no_at_returns_none(self):
        assert split_address("plainaddress") is None

    def test_last_at_wins(self):
        parsed = split_address("a@b@example.com")
        assert parsed.local_part == "a@b"
        assert parsed.domain == "example.com"

    def test_empty_halves_kept(self):
        parsed = split_address("user@")
        assert parsed.local_part == "user"
        assert parsed.domain == ""
        assert split_address("@example.com").local_part == ""

    def test_str_round_trip(self):
        assert str(split_address("john@example.com")) == "john@example.com"


class TestQuotedSegments:
    """Quoted local-part handling, including the documented middle-segment edge."""

    def test_fully_quoted(self):
        assert is_fully_quoted('"john doe"')
        assert not is_fully_quoted('""')
        assert not is_fully_quoted('"a"b"')
        assert not is_fully_quoted('"john".doe')

    def test_whole_token_stripped(self):
        assert strip_quoted_segments('"a"b"') == ""

    def test_leading_segment_stripped(self):
        assert strip_quoted_segments('"john..doe".smith') == "smith"

    def test_trailing_segment_stripped(self):
        assert strip_quoted_segments('smith."john doe"') == "smith"

    def test_quotes_at_both_ends_strip_everything(self):
        assert strip_quoted_segments('"a".mid."b"') == ""
        assert strip_quoted_segments('"a".mid.x') == "mid.x"

    def test_middle_segment_without_quoted_tail_kept(self):
        assert strip_quoted_segments('a."b".c') == 'a."b".c'

    def test_middle_segment_with_quoted_tail_strips_to_end(self):
        assert strip_quoted_segments('a."b".c."d"') == "a"

    def test_unquoted_unchanged(self):
        assert strip_quoted_segments("john.doe") == "john.doe"

    def test_newline_prevents_stripping(self):
        assert strip_quoted_segments('"a\nb".c') == '"a\nb".c'


class TestValidateDomain:
    """Ordered domain cascade."""

    @pytest.mark.parametrize(
        "domain,expected",
        [
            ("-example.com", FailureCategory.DOMAIN_STARTS_WITH_HYPHEN),
            (".example.com", FailureCategory.DOMAIN_STARTS_WITH_DOT),
            ("example-", FailureCategory.DOMAIN_ENDS_WITH_HYPHEN),
            ("example.com.", FailureCategory.DOMAIN_ENDS_WITH_DOT),
            ("-example.", FailureCategory.DOMAIN_STARTS_WITH_HYPHEN),
            (".example-", FailureCategory.DOMAIN_STARTS_WITH_DOT),
            ("exa_mple.com", FailureCategory.INVALID_DOMAIN),
            ("exa mple.com", FailureCategory.INVALID_DOMAIN),
            ("", FailureCategory.INVALID_DOMAIN),
        ],
    )
    def test_failures(self, domain, expected):
        assert category(validate_domain(domain)) == expected

    @pytest.mark.parametrize(
        "domain",
        [
            "example.com",
            "sub.exa-mple.co.uk",
            "localhost",
            "exämple.de",
            "例子.广告",
            "192.168.0.1",
            "[192.168.0.1]",
            "::1",
            "[::1]",
            "[2001:db8::1]",
            "[fe80::1%eth0]",
        ],
    )
    def test_accepted(self, domain):
        assert validate_domain(domain).ok


class TestValidatePow:
    """End-to-end pow grammar."""

    def test_valid_address(self):
        assert validate_pow("valid.email@example.com").ok

    @pytest.mark.parametrize("address", ["plainaddress", "", "example.com", "john doe"])
    def test_no_at_is_invalid_format(self, address):
        assert category(validate_pow(address)) == FailureCategory.INVALID_FORMAT

    def test_empty_local_part_is_invalid_format(self):
        assert category(validate_pow("@invalid_email")) == FailureCategory.INVALID_FORMAT

    def test_local_part_length_boundary(self):
        assert validate_pow("a" * 64 + "@example.com").ok
        assert category(validate_pow("a" * 65 + "@example.com")) == FailureCategory.LOCAL_PART_TOO_LONG

    def test_local_part_length_counts_bytes(self):
        assert validate_pow("é" * 32 + "@example.com").ok
        assert category(validate_pow("é" * 33 + "@example.com")) == FailureCategory.LOCAL_PART_TOO_LONG

    def test_domain_length_boundary(self):
        assert validate_pow("user@" + "a" * 251 + ".com").ok
        assert category(validate_pow("user@" + "a" * 252 + ".com")) == FailureCategory.DOMAIN_TOO_LONG

    def test_length_checks_precede_empty_local_part(self):
        assert category(validate_pow("@" + "a" * 256)) == FailureCategory.DOMAIN_TOO_LONG

    def test_quoted_local_part_bypasses_character_rules(self):
        assert validate_pow('"john doe"@example.com').ok
        assert validate_pow('"a@b"@example.com').ok

    def test_quoted_bypass_still_checks_domain(self):
        assert category(validate_pow('"john doe"@-example.com')) == FailureCategory.DOMAIN_STARTS_WITH_HYPHEN

    def test_space_outside_quotes_rejected(self):
        assert category(validate_pow("john doe@example.com")) == FailureCategory.INVALID_LOCAL_PART_CHARACTERS

    def test_consecutive_dots(self):
        assert category(validate_pow("john..doe@example.com")) == FailureCategory.CONSECUTIVE_DOTS

    def test_consecutive_dots_inside_quotes_allowed(self):
        assert validate_pow('"john..doe".smith@example.com').ok

    def test_trailing_quoted_segment(self):
        assert validate_pow('smith."john doe"@example.com').ok

    def test_middle_quoted_segment_rejected(self):
        assert category(validate_pow('a."b".c@example.com')) == FailureCategory.INVALID_LOCAL_PART_CHARACTERS

    def test_unbalanced_quotes_rejected(self):
        assert category(validate_pow('"a"b"@example.com')) == FailureCategory.INVALID_LOCAL_PART_CHARACTERS

    def test_at_in_unquoted_local_part_rejected(self):
        assert category(validate_pow("a@b@example.com")) == FailureCategory.INVALID_LOCAL_PART_CHARACTERS

    def test_comma_not_allowed(self):
        assert category(validate_pow("a,b@example.com")) == FailureCategory.INVALID_LOCAL_PART_CHARACTERS

    def test_special_characters_allowed(self):
        assert validate_pow("!#$%&'*+-/=?^_`{|}~.x@example.com").ok

    def test_unicode_local_part_and_domain(self):
        assert validate_pow("josé@exämple.de").ok
        assert validate_pow("用户@例子.广告").ok

    def test_domain_hyphen_precedence(self):
        assert category(validate_pow("user@-example.com")) == FailureCategory.DOMAIN_STARTS_WITH_HYPHEN

    def test_ipv4_domain(self):
        assert validate_pow("user@192.168.0.1").ok
        assert validate_pow("user@[192.168.0.1]").ok

    def test_ipv6_domain(self):
        assert validate_pow("user@[::1]").ok
        assert validate_pow("user@::1").ok
        assert validate_pow("user@[IPv6-less:garbage]").ok is False

    def test_ip_literal_must_span_whole_domain(self):
        assert category(validate_pow("user@foo bar::1")) == FailureCategory.INVALID_DOMAIN
        assert category(validate_pow("user@host 10.0.0.1")) == FailureCategory.INVALID_DOMAIN

    def test_empty_domain_fails_domain_validation(self):
        assert category(validate_pow("user@")) == FailureCategory.INVALID_DOMAIN

    def test_failure_message_and_detail(self):
        outcome = validate_pow("john..doe@example.com")
        assert outcome.reason.message == "is not a valid email"
        assert outcome.reason.detail == "consecutive dots in local-part"

    def test_idempotent(self):
        for address in ("john..doe@example.com", "valid.email@example.com", "x@-y"):
            assert validate_pow(address) == validate_pow(address)
