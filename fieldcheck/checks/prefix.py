"""
Prefix Check — value must start with a literal (or field-sourced) prefix.
"""
from typing import Callable

from fieldcheck.config.constants import MSG_MISSING_PREFIX
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason


def starts_with_check(prefix: str) -> Callable[[str], CheckOutcome]:
    def check(value: str) -> CheckOutcome:
        if value.startswith(prefix):
            return CheckOutcome.success()
        return CheckOutcome.failure(
            FailureReason.of(FailureCategory.MISSING_PREFIX, MSG_MISSING_PREFIX % prefix)
        )

    return check
