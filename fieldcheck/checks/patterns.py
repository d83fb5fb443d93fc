"""
Pattern Validators — structural shape checks written as explicit predicates.

- validate_html_shape    : the browser ``<input type="email">`` grammar
- validate_ipv4_literal  : dotted-quad address
- validate_ipv6_literal  : full / compressed / embedded-IPv4 / zoned address

Each rule is a character-class, length or position test so that the
accepted language is readable from the code.
"""

from fieldcheck.config.constants import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    HEX_DIGITS,
    HTML_LOCAL_PART_SYMBOLS,
    MAX_HTML_LABEL_LENGTH,
    MSG_INVALID_EMAIL,
)
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason


_ASCII_ALNUM = ASCII_LETTERS | ASCII_DIGITS
_HTML_LOCAL_CHARS = _ASCII_ALNUM | HTML_LOCAL_PART_SYMBOLS
_HTML_LABEL_CHARS = _ASCII_ALNUM | {"-"}

_IPV6_GROUPS = 8
_LINK_LOCAL_PREFIX = "fe80:"


# ======================================================================
# HTML email input
# ======================================================================

def validate_html_shape(address: str) -> CheckOutcome:
    """
    Match the WHATWG email input grammar (ASCII only).

    Exactly one ``@``; a non-empty local-part made of ASCII letters, digits
    and ``.!#$%&'*+/=?^_`{|}~-``; a domain of dot-separated labels, each
    1-63 alphanumerics or hyphens and neither starting nor ending with a
    hyphen.
    """
    if _is_html_shape(address):
        return CheckOutcome.success()
    return CheckOutcome.failure(
        FailureReason.of(FailureCategory.NOT_HTML_SHAPE, MSG_INVALID_EMAIL)
    )


def _is_html_shape(address: str) -> bool:
    if address.count("@") != 1:
        return False
    local_part, domain = address.split("@")
    if not local_part or any(c not in _HTML_LOCAL_CHARS for c in local_part):
        return False
    return all(_is_html_label(label) for label in domain.split("."))


def _is_html_label(label: str) -> bool:
    if not 1 <= len(label) <= MAX_HTML_LABEL_LENGTH:
        return False
    if any(c not in _HTML_LABEL_CHARS for c in label):
        return False
    return label[0] != "-" and label[-1] != "-"


# ======================================================================
# IP literals
# ======================================================================

def _unbracket(text: str) -> str:
    """Drop one enclosing ``[...]`` pair (address-literal notation)."""
    if len(text) >= 2 and text[0] == "[" and text[-1] == "]":
        return text[1:-1]
    return text


def _is_ipv4(text: str) -> bool:
    octets = text.split(".")
    if len(octets) != 4:
        return False
    for octet in octets:
        if not 1 <= len(octet) <= 3 or any(c not in ASCII_DIGITS for c in octet):
            return False
        if int(octet) > 255:
            return False
    return True


def validate_ipv4_literal(text: str) -> bool:
    """Four dot-separated decimal octets, each 0-255."""
    return _is_ipv4(_unbracket(text))


def _is_hex_group(group: str) -> bool:
    return 1 <= len(group) <= 4 and all(c in HEX_DIGITS for c in group)


def _is_ipv6_address(address: str) -> bool:
    groups_needed = _IPV6_GROUPS

    # Trailing dotted quad stands for the last two groups
    if "." in address:
        sep = address.rfind(":")
        if sep == -1 or not _is_ipv4(address[sep + 1:]):
            return False
        address = address[: sep + 1]
        if not address.endswith("::"):
            address = address[:-1]
        groups_needed -= 2

    if address.count("::") > 1:
        return False

    if "::" in address:
        left, right = address.split("::")
        explicit = (left.split(":") if left else []) + (right.split(":") if right else [])
        if len(explicit) > groups_needed - 1:
            return False
    else:
        explicit = address.split(":")
        if len(explicit) != groups_needed:
            return False

    return all(_is_hex_group(g) for g in explicit)


def validate_ipv6_literal(text: str) -> bool:
    """
    IPv6 text forms:

    * full ``h:h:h:h:h:h:h:h`` (1-4 hex digits per group)
    * compressed, a single ``::`` standing for one or more zero groups
    * trailing embedded IPv4 (``::ffff:192.0.2.1``, ``64:ff9b::192.0.2.1``)
    * link-local with zone id (``fe80::1%eth0``); zone ids are alphanumeric
    """
    text = _unbracket(text)
    if not text:
        return False

    address, sep, zone = text.partition("%")
    if sep:
        if not zone or any(c not in _ASCII_ALNUM for c in zone):
            return False
        if not address.lower().startswith(_LINK_LOCAL_PREFIX):
            return False

    return _is_ipv6_address(address)
