"""
Check Registry — maps check identifiers to check functions.

A registry is immutable once built: ``extend`` / ``with_checks`` return a new
registry, so a shared instance can be read from any thread without locking.
Resolving an unregistered identifier is a configuration error and raises.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Union

from fieldcheck.checks.burner import burner_check
from fieldcheck.checks.email_grammar import validate_pow
from fieldcheck.checks.luhn import validate_luhn
from fieldcheck.checks.patterns import validate_html_shape
from fieldcheck.models.outcome import CheckId, CheckOutcome, FailureCategory, FailureReason

logger = logging.getLogger(__name__)

CheckFn = Callable[[str], CheckOutcome]
CheckRef = Union[CheckId, str]


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class CheckConfigurationError(Exception):
    """A validation call was configured in a way that cannot run."""


class UnknownCheckError(CheckConfigurationError):
    """Raised when a requested check identifier has no registered function."""

    def __init__(self, check_id: str, available: Iterable[str]) -> None:
        self.check_id = check_id
        self.available = sorted(available)
        super().__init__(
            f"Unknown check '{check_id}' (registered: {', '.join(self.available)})"
        )


def check_name(check: CheckRef) -> str:
    return check.value if isinstance(check, CheckId) else str(check)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class CheckRegistry:
    """Read-only table ``check id -> Value -> CheckOutcome``."""

    def __init__(self, checks: Mapping[CheckRef, CheckFn]):
        table: Dict[str, CheckFn] = {}
        for check, fn in checks.items():
            if not callable(fn):
                raise CheckConfigurationError(f"Check '{check_name(check)}' is not callable")
            table[check_name(check)] = fn
        self._checks = MappingProxyType(table)

    def resolve(self, check: CheckRef) -> CheckFn:
        name = check_name(check)
        try:
            return self._checks[name]
        except KeyError:
            logger.error("Unresolvable check '%s' requested", name)
            raise UnknownCheckError(name, self._checks.keys()) from None

    def resolve_all(self, checks: Iterable[CheckRef]) -> List[tuple]:
        """Resolve every identifier up front; ``[(name, fn), ...]`` in order."""
        return [(check_name(c), self.resolve(c)) for c in checks]

    def extend(self, checks: Mapping[CheckRef, CheckFn]) -> CheckRegistry:
        """New registry with *checks* added (or replacing same-named ones)."""
        merged: Dict[CheckRef, CheckFn] = dict(self._checks)
        merged.update(checks)
        return CheckRegistry(merged)

    def with_checks(self, **checks: CheckFn) -> CheckRegistry:
        return self.extend(checks)

    def names(self) -> List[str]:
        return list(self._checks.keys())

    def __contains__(self, check: object) -> bool:
        return isinstance(check, str) and check_name(check) in self._checks

    def __iter__(self) -> Iterator[str]:
        return iter(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def __repr__(self) -> str:
        return f"CheckRegistry({self.names()})"


def custom_check(predicate: Callable[[str], bool], message: str = "is invalid") -> CheckFn:
    """Turn a boolean predicate into a check reporting the ``custom`` category."""

    def check(value: str) -> CheckOutcome:
        if predicate(value):
            return CheckOutcome.success()
        return CheckOutcome.failure(FailureReason.of(FailureCategory.CUSTOM, message))

    return check


def build_default_registry() -> CheckRegistry:
    return CheckRegistry({
        CheckId.HTML_INPUT: validate_html_shape,
        CheckId.POW: validate_pow,
        CheckId.BURNER: burner_check(),
        CheckId.LUHN: validate_luhn,
    })


# Module-level default registry, built once
DEFAULT_REGISTRY = build_default_registry()
