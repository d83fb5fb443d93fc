"""
Luhn Checksum — mod-10 check used by card numbers, IMEIs, SIRENs, …
"""
from fieldcheck.config.constants import ASCII_DIGITS, MSG_INVALID_NUMBER
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason

# Grouping characters tolerated between digits
_SEPARATORS = (" ", "-")


def luhn_checksum_valid(number: str) -> bool:
    """True when *number* (digits only) satisfies the Luhn formula."""
    total = 0
    for i, c in enumerate(reversed(number)):
        digit = int(c)
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_luhn(value: str) -> CheckOutcome:
    digits = value
    for sep in _SEPARATORS:
        digits = digits.replace(sep, "")

    if digits and all(c in ASCII_DIGITS for c in digits) and luhn_checksum_valid(digits):
        return CheckOutcome.success()
    return CheckOutcome.failure(
        FailureReason.of(FailureCategory.INVALID_CHECKSUM, MSG_INVALID_NUMBER)
    )
