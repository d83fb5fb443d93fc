"""
Email Grammar Validator — the ``pow`` check.

Rules:
- Split into local-part and domain at the last ``@``
- Local-part:
    - at most 64 octets (UTF-8)
    - quoted and unquoted content separated by a single dot
    - outside quoted content only letters, ASCII digits and
      ``!#$%&'*+-/=?^_`{|}~.``
    - no consecutive dots outside quoted content
- Domain:
    - at most 255 octets (UTF-8)
    - letters, ASCII digits, hyphen and dots
    - does not start or end with a hyphen or a dot
    - or an IPv6 / IPv4 literal

Unicode letters are permitted in both local-part and domain. Precedence is
fixed: the fully-quoted bypass wins over the character rules, and the domain
edge rules win over the character-class match.
"""
import logging
from typing import Optional

from fieldcheck.checks.patterns import validate_ipv4_literal, validate_ipv6_literal
from fieldcheck.config.constants import (
    ASCII_DIGITS,
    DOMAIN_SYMBOLS,
    LOCAL_PART_SYMBOLS,
    MAX_DOMAIN_BYTES,
    MAX_LOCAL_PART_BYTES,
    MSG_INVALID_EMAIL,
)
from fieldcheck.models.email_address import EmailAddress
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason

logger = logging.getLogger(__name__)

_QUOTE = '"'


def _failed(category: FailureCategory) -> CheckOutcome:
    return CheckOutcome.failure(FailureReason.of(category, MSG_INVALID_EMAIL))


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


# ======================================================================
# Split
# ======================================================================

def split_address(address: str) -> Optional[EmailAddress]:
    """
    Split on the last ``@``; None when there is none.

    ``"a@b@example.com"`` gives local-part ``"a@b"`` and domain
    ``"example.com"``. Both halves may come back empty.
    """
    if "@" not in address:
        return None
    local_part, _, domain = address.rpartition("@")
    return EmailAddress(local_part=local_part, domain=domain)


# ======================================================================
# Local-part
# ======================================================================

def is_fully_quoted(local_part: str) -> bool:
    """One quoted token with at least one character and no inner quote."""
    return (
        len(local_part) >= 3
        and local_part[0] == _QUOTE
        and local_part[-1] == _QUOTE
        and _QUOTE not in local_part[1:-1]
    )


def strip_quoted_segments(local_part: str) -> str:
    """
    Remove quoted content before the character rules run.

    Three positions are stripped, in this order:

    1. the whole local-part when it starts and ends with a quote
       (``"a"b"`` becomes ``""``);
    2. a leading ``"…".``, up to the last ``".`` (``"x".y`` becomes ``y``);
    3. a trailing ``."…"``, from the first ``."`` on, when the local-part
       ends with a quote (``a."b".c."d"`` becomes ``a``).

    A quoted segment in the middle that is not followed by a quoted tail is
    kept as is (``a."b".c`` is unchanged) and then fails the character
    rules on its quotes. Local-parts containing a newline are never
    stripped.
    """
    if "\n" in local_part:
        return local_part

    if len(local_part) >= 2 and local_part[0] == _QUOTE and local_part[-1] == _QUOTE:
        return ""

    rest = local_part
    if rest.startswith(_QUOTE):
        end = rest.rfind('".')
        if end >= 1:
            rest = rest[end + 2:]

    if rest.endswith(_QUOTE):
        start = rest.find('."')
        if start != -1 and start + 2 < len(rest):
            rest = rest[:start]

    return rest


def _has_consecutive_dots(text: str) -> bool:
    return ".." in text


def _is_local_part_char(c: str) -> bool:
    return c.isalpha() or c in ASCII_DIGITS or c in LOCAL_PART_SYMBOLS


def _has_valid_local_part_characters(sanitized: str) -> bool:
    return len(sanitized) > 0 and all(_is_local_part_char(c) for c in sanitized)


def _validate_local_part(local_part: str, domain: str) -> CheckOutcome:
    if is_fully_quoted(local_part):
        return validate_domain(domain)

    sanitized = strip_quoted_segments(local_part)

    if _has_consecutive_dots(sanitized):
        return _failed(FailureCategory.CONSECUTIVE_DOTS)

    if _has_valid_local_part_characters(sanitized):
        return validate_domain(domain)

    return _failed(FailureCategory.INVALID_LOCAL_PART_CHARACTERS)


# ======================================================================
# Domain
# ======================================================================

def _is_domain_char(c: str) -> bool:
    return c.isalpha() or c in ASCII_DIGITS or c in DOMAIN_SYMBOLS


def validate_domain(domain: str) -> CheckOutcome:
    """
    Ordered cascade, first match wins:

    starts with ``-`` / starts with ``.`` / ends with ``-`` / ends with ``.``
    → edge failure; letters-digits-hyphen-dot → ok; IPv6 literal → ok;
    IPv4 literal → ok; anything else (including an empty domain) →
    ``invalid_domain``.
    """
    if domain.startswith("-"):
        return _failed(FailureCategory.DOMAIN_STARTS_WITH_HYPHEN)
    if domain.startswith("."):
        return _failed(FailureCategory.DOMAIN_STARTS_WITH_DOT)
    if domain.endswith("-"):
        return _failed(FailureCategory.DOMAIN_ENDS_WITH_HYPHEN)
    if domain.endswith("."):
        return _failed(FailureCategory.DOMAIN_ENDS_WITH_DOT)

    if domain and all(_is_domain_char(c) for c in domain):
        return CheckOutcome.success()
    if validate_ipv6_literal(domain):
        return CheckOutcome.success()
    if validate_ipv4_literal(domain):
        return CheckOutcome.success()

    return _failed(FailureCategory.INVALID_DOMAIN)


# ======================================================================
# Entry point
# ======================================================================

def validate_pow(address: str) -> CheckOutcome:
    """
    Grammar-level validation of *address*.

    Failure categories, checked in this order: ``invalid_format`` (no ``@``),
    ``local_part_too_long``, ``domain_too_long``, ``invalid_format`` (empty
    local-part), then the local-part and domain rules.
    """
    parsed = split_address(address)
    if parsed is None:
        return _failed(FailureCategory.INVALID_FORMAT)

    if _byte_length(parsed.local_part) > MAX_LOCAL_PART_BYTES:
        return _failed(FailureCategory.LOCAL_PART_TOO_LONG)
    if _byte_length(parsed.domain) > MAX_DOMAIN_BYTES:
        return _failed(FailureCategory.DOMAIN_TOO_LONG)
    if parsed.local_part == "":
        return _failed(FailureCategory.INVALID_FORMAT)

    outcome = _validate_local_part(parsed.local_part, parsed.domain)
    if not outcome.ok:
        logger.debug("pow rejected address: %s", outcome.reason.detail)
    return outcome
