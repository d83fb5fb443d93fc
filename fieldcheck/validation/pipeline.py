"""
Check Pipeline — runs an ordered set of checks against one value.

- Every identifier is resolved before the first check runs, so a
  misconfigured call fails before doing any work.
- No short-circuit: all requested checks run, whatever earlier ones returned.
- Failures are reported in the requested order.
"""
import logging
from typing import Iterable

from fieldcheck.checks.registry import (
    DEFAULT_REGISTRY,
    CheckConfigurationError,
    CheckRef,
    CheckRegistry,
    check_name,
)
from fieldcheck.models.outcome import CheckFailure, CheckOutcome, PipelineResult

logger = logging.getLogger(__name__)


def run_checks(
    value: str,
    checks: Iterable[CheckRef],
    registry: CheckRegistry = DEFAULT_REGISTRY,
) -> PipelineResult:
    """
    Run *checks* against *value*.

    Args:
        value: Text under validation, never mutated.
        checks: Ordered, unique check identifiers.
        registry: Where identifiers are resolved.

    Returns:
        PipelineResult with one CheckFailure per failed check.

    Raises:
        UnknownCheckError: an identifier is not registered.
        CheckConfigurationError: an identifier is requested twice, or a
            check returned something other than a CheckOutcome.
    """
    names = [check_name(c) for c in checks]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        logger.error("Duplicate checks requested: %s", duplicates)
        raise CheckConfigurationError(f"Duplicate checks requested: {duplicates}")

    resolved = registry.resolve_all(names)

    result = PipelineResult()
    for name, check_fn in resolved:
        outcome = check_fn(value)
        if not isinstance(outcome, CheckOutcome):
            raise CheckConfigurationError(
                f"Check '{name}' returned {type(outcome).__name__}, expected CheckOutcome"
            )
        if not outcome.ok:
            result.failures.append(CheckFailure(check_id=name, reason=outcome.reason))
        logger.debug("check %s -> %r", name, outcome)

    return result
