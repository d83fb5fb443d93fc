"""
Country Format Checks — postal codes and social security numbers.

Patterns are pure data (config.constants) compiled once at import time; the
check for a given country is built per call from the ``country`` option.
"""
import re
from typing import Callable, Dict, Pattern

from fieldcheck.checks.registry import CheckConfigurationError
from fieldcheck.config.constants import (
    MSG_INVALID_POSTAL_CODE,
    MSG_INVALID_SSN,
    POSTAL_CODE_PATTERNS,
    SSN_PATTERNS,
)
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason

_POSTAL_CODE_RE: Dict[str, Pattern] = {c: re.compile(p) for c, p in POSTAL_CODE_PATTERNS.items()}
_SSN_RE: Dict[str, Pattern] = {c: re.compile(p) for c, p in SSN_PATTERNS.items()}


def _country_check(
    table: Dict[str, Pattern],
    country: str,
    kind: str,
    category: FailureCategory,
    message: str,
) -> Callable[[str], CheckOutcome]:
    if not country:
        raise CheckConfigurationError(f"{kind} validation requires a country")
    pattern = table.get(country.lower())
    if pattern is None:
        raise CheckConfigurationError(
            f"No {kind} format for country '{country}' (known: {', '.join(sorted(table))})"
        )

    def check(value: str) -> CheckOutcome:
        if pattern.match(value.strip().upper()):
            return CheckOutcome.success()
        return CheckOutcome.failure(FailureReason.of(category, message))

    return check


def postal_code_check(country: str) -> Callable[[str], CheckOutcome]:
    return _country_check(
        _POSTAL_CODE_RE,
        country,
        "postal code",
        FailureCategory.INVALID_POSTAL_CODE,
        MSG_INVALID_POSTAL_CODE,
    )


def ssn_check(country: str) -> Callable[[str], CheckOutcome]:
    return _country_check(
        _SSN_RE,
        country,
        "social security number",
        FailureCategory.INVALID_SSN,
        MSG_INVALID_SSN,
    )
