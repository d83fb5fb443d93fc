"""
Constants used across the validation engine.
Fixed tables are built once at import time and never mutated.
"""
from typing import Dict, FrozenSet, List

# =============================================================================
# Email limits (octets, RFC 5321 §4.5.3.1)
# =============================================================================
MAX_LOCAL_PART_BYTES: int = 64
MAX_DOMAIN_BYTES: int = 255

# HTML email input: each domain label is 1-63 characters
MAX_HTML_LABEL_LENGTH: int = 63

# =============================================================================
# Default user-facing messages
# =============================================================================
MSG_INVALID_EMAIL: str = "is not a valid email"
MSG_FORBIDDEN_PROVIDER: str = "uses a forbidden provider"
MSG_INVALID_NUMBER: str = "is not a valid number"
MSG_INVALID_POSTAL_CODE: str = "is not a valid postal code"
MSG_INVALID_SSN: str = "is not a valid social security number"
MSG_MISSING_PREFIX: str = "does not start with %s"

# =============================================================================
# Default check selection per validation family
# =============================================================================
DEFAULT_LUHN_CHECKS: List[str] = ["luhn"]

# =============================================================================
# Character tables
# =============================================================================
ASCII_DIGITS: FrozenSet[str] = frozenset("0123456789")
ASCII_LETTERS: FrozenSet[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
HEX_DIGITS: FrozenSet[str] = frozenset("0123456789abcdefABCDEF")

# Symbols allowed in an unquoted local-part (pow profile), besides letters/digits
LOCAL_PART_SYMBOLS: FrozenSet[str] = frozenset("!#$%&'*+-/=?^_`{|}~.")

# Symbols allowed in the local-part of the browser email input, besides ASCII alnum
HTML_LOCAL_PART_SYMBOLS: FrozenSet[str] = frozenset(".!#$%&'*+/=?^_`{|}~-")

# Symbols allowed in a pow domain, besides letters/digits
DOMAIN_SYMBOLS: FrozenSet[str] = frozenset("-.")

# =============================================================================
# Burner (disposable) email providers — built-in seed list
# =============================================================================
BURNER_DOMAINS: FrozenSet[str] = frozenset({
    "10minutemail.com",
    "10minutemail.net",
    "discard.email",
    "dispostable.com",
    "fakeinbox.com",
    "getairmail.com",
    "getnada.com",
    "guerrillamail.com",
    "guerrillamail.net",
    "guerrillamailblock.com",
    "mailcatch.com",
    "maildrop.cc",
    "mailinator.com",
    "mailinator.net",
    "mailnesia.com",
    "mintemail.com",
    "mohmal.com",
    "sharklasers.com",
    "spamgourmet.com",
    "temp-mail.org",
    "tempmail.net",
    "tempr.email",
    "throwawaymail.com",
    "trashmail.com",
    "trashmail.net",
    "yopmail.com",
    "yopmail.fr",
    "yopmail.net",
})

# =============================================================================
# Country rule tables (pure data, upper-cased input is matched)
# =============================================================================
POSTAL_CODE_PATTERNS: Dict[str, str] = {
    "be": r"^\d{4}$",
    "ca": r"^[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z] ?\d[ABCEGHJ-NPRSTV-Z]\d$",
    "ch": r"^\d{4}$",
    "de": r"^\d{5}$",
    "es": r"^(0[1-9]|[1-4]\d|5[0-2])\d{3}$",
    "fr": r"^\d{5}$",
    "gb": r"^(GIR ?0AA|[A-PR-UWYZ]([0-9]{1,2}|([A-HK-Y][0-9]([0-9ABEHMNPRV-Y])?)|[0-9][A-HJKPS-UW]) ?[0-9][ABD-HJLNP-UW-Z]{2})$",
    "it": r"^\d{5}$",
    "nl": r"^\d{4} ?[A-Z]{2}$",
    "us": r"^\d{5}(-\d{4})?$",
}

SSN_PATTERNS: Dict[str, str] = {
    "fr": r"^[12]\d{2}(0[1-9]|1[0-2])(\d{2}|2[AB])\d{6}(\d{2})?$",
    "us": r"^(?!000|666|9\d\d)\d{3}-?(?!00)\d{2}-?(?!0000)\d{4}$",
}
