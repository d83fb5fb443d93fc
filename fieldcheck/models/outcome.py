"""
Check outcomes — the value every check returns instead of raising.

A check either succeeds (``CheckOutcome.success()``) or fails with a
``FailureReason``: a stable category tag, a short diagnostic, and the default
user-facing message that ends up on the host record.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class CheckId(str, Enum):
    """Built-in check identifiers. Any other registered name is a custom check."""

    HTML_INPUT = "html_input"
    POW = "pow"
    BURNER = "burner"
    LUHN = "luhn"
    POSTAL_CODE = "postal_code"
    SSN = "ssn"
    STARTS_WITH = "starts_with"


class FailureCategory(str, Enum):
    """Machine-readable failure tags."""

    # Structural
    INVALID_FORMAT = "invalid_format"
    LOCAL_PART_TOO_LONG = "local_part_too_long"
    DOMAIN_TOO_LONG = "domain_too_long"
    CONSECUTIVE_DOTS = "consecutive_dots"
    INVALID_LOCAL_PART_CHARACTERS = "invalid_local_part_characters"
    INVALID_DOMAIN = "invalid_domain"
    DOMAIN_STARTS_WITH_HYPHEN = "domain_starts_with_hyphen"
    DOMAIN_STARTS_WITH_DOT = "domain_starts_with_dot"
    DOMAIN_ENDS_WITH_HYPHEN = "domain_ends_with_hyphen"
    DOMAIN_ENDS_WITH_DOT = "domain_ends_with_dot"
    NOT_HTML_SHAPE = "not_html_shape"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_POSTAL_CODE = "invalid_postal_code"
    INVALID_SSN = "invalid_ssn"
    MISSING_PREFIX = "missing_prefix"
    # Policy
    FORBIDDEN_PROVIDER = "forbidden_provider"
    # Caller-registered checks
    CUSTOM = "custom"


# Short stable diagnostics, used as FailureReason.detail
CATEGORY_DETAILS: dict = {
    FailureCategory.INVALID_FORMAT: "invalid format",
    FailureCategory.LOCAL_PART_TOO_LONG: "local-part too long",
    FailureCategory.DOMAIN_TOO_LONG: "domain too long",
    FailureCategory.CONSECUTIVE_DOTS: "consecutive dots in local-part",
    FailureCategory.INVALID_LOCAL_PART_CHARACTERS: "invalid characters in local-part",
    FailureCategory.INVALID_DOMAIN: "invalid domain",
    FailureCategory.DOMAIN_STARTS_WITH_HYPHEN: "domain begins with hyphen",
    FailureCategory.DOMAIN_STARTS_WITH_DOT: "domain begins with a dot",
    FailureCategory.DOMAIN_ENDS_WITH_HYPHEN: "domain ends with hyphen",
    FailureCategory.DOMAIN_ENDS_WITH_DOT: "domain ends with a dot",
    FailureCategory.NOT_HTML_SHAPE: "does not match the html email input shape",
    FailureCategory.INVALID_CHECKSUM: "luhn checksum mismatch",
    FailureCategory.INVALID_POSTAL_CODE: "postal code does not match country format",
    FailureCategory.INVALID_SSN: "ssn does not match country format",
    FailureCategory.MISSING_PREFIX: "prefix not found",
    FailureCategory.FORBIDDEN_PROVIDER: "burner email provider",
    FailureCategory.CUSTOM: "custom check failed",
}


@dataclass(frozen=True)
class FailureReason:
    """Why a single check failed."""

    category: FailureCategory
    detail: str
    message: str

    @classmethod
    def of(cls, category: FailureCategory, message: str) -> "FailureReason":
        """Build a reason using the category's stock diagnostic."""
        return cls(category=category, detail=CATEGORY_DETAILS[category], message=message)


@dataclass(frozen=True)
class CheckOutcome:
    """``Ok`` when ``reason`` is None, ``Failed(reason)`` otherwise."""

    reason: Optional[FailureReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls) -> "CheckOutcome":
        return _SUCCESS

    @classmethod
    def failure(cls, reason: FailureReason) -> "CheckOutcome":
        return cls(reason=reason)

    def __repr__(self) -> str:
        if self.reason is None:
            return "Ok"
        return f"Failed({self.reason.category.value})"


_SUCCESS = CheckOutcome()


@dataclass(frozen=True)
class CheckFailure:
    """One failed check inside a pipeline run."""

    check_id: str
    reason: FailureReason

    def to_dict(self) -> dict:
        return {
            "check": self.check_id,
            "reason": self.reason.category.value,
            "detail": self.reason.detail,
            "message": self.reason.message,
        }


@dataclass
class PipelineResult:
    """Ordered failures of one pipeline run; empty means the value passed."""

    failures: List[CheckFailure] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.failures) == 0

    def check_ids(self) -> List[str]:
        return [f.check_id for f in self.failures]

    def __iter__(self) -> Iterator[CheckFailure]:
        return iter(self.failures)

    def __len__(self) -> int:
        return len(self.failures)
