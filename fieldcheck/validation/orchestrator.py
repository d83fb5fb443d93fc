"""
Field Validation Orchestrator — main entry point for validating one field.

Flow:
    1. Read the field's pending value from the host record (skip if unset)
    2. Run the check pipeline with the requested (or default) checks
    3. Push one error per failed check back to the record, tagged with the
       validation family, the check id and the failure category

Invalid input never raises: it only accumulates errors on the record.
Misconfiguration (unknown check, missing country, bad options) does.
"""
import logging
from typing import Any, List, Optional

from fieldcheck.checks.country_formats import postal_code_check, ssn_check
from fieldcheck.checks.prefix import starts_with_check
from fieldcheck.checks.registry import (
    DEFAULT_REGISTRY,
    CheckConfigurationError,
    CheckRegistry,
)
from fieldcheck.config import settings
from fieldcheck.config.constants import DEFAULT_LUHN_CHECKS
from fieldcheck.models.changeset import HostRecord
from fieldcheck.models.options import OptionsLike, ValidationOptions, coerce_options
from fieldcheck.models.outcome import CheckId
from fieldcheck.validation.metrics import record_check_failure, timed_pipeline
from fieldcheck.validation.pipeline import run_checks

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise CheckConfigurationError(f"Pending value is not UTF-8 text: {e}") from e
    return str(value)


def validate_field(
    record: HostRecord,
    field_name: str,
    options: OptionsLike = None,
    *,
    family: str = "email",
    registry: CheckRegistry = DEFAULT_REGISTRY,
    default_checks: Optional[List[str]] = None,
) -> HostRecord:
    """
    Validate one field of *record* and report failures on it.

    Args:
        record: Host record exposing get_pending_value / push_error.
        field_name: Field to validate.
        options: ValidationOptions, a dict of the same keys, or None.
        family: Tag written as ``validation`` in every error's metadata.
        registry: Where check identifiers are resolved.
        default_checks: Checks run when options.checks is not given.
                        Defaults to the configured email checks.

    Returns:
        The record, with zero or more error entries added. Returned
        unchanged when the field has no pending value.
    """
    opts = coerce_options(options)

    value = record.get_pending_value(field_name)
    if value is None:
        logger.debug("Field '%s' not in pending changes, skipping %s validation", field_name, family)
        return record

    if default_checks is None:
        default_checks = settings.DEFAULT_EMAIL_CHECKS
    checks = opts.checks_or(default_checks)

    with timed_pipeline(family):
        result = run_checks(_as_text(value), checks, registry)

    for failure in result:
        message = opts.message if opts.message is not None else failure.reason.message
        metadata = {
            "validation": family,
            "check": failure.check_id,
            "reason": failure.reason.category.value,
        }
        record = record.push_error(field_name, message, metadata)
        record_check_failure(family, failure.check_id, failure.reason.category.value)

    if not result.valid:
        logger.debug(
            "Field '%s' failed %s checks: %s",
            field_name,
            family,
            result.check_ids(),
        )
    return record


# ======================================================================
# Family entry points
# ======================================================================

def validate_email(
    record: HostRecord,
    field_name: str,
    options: OptionsLike = None,
    *,
    registry: CheckRegistry = DEFAULT_REGISTRY,
) -> HostRecord:
    """
    Email validation. Checks: ``pow`` (default), ``html_input``, ``burner``,
    or any custom check registered in *registry*.
    """
    return validate_field(
        record,
        field_name,
        options,
        family="email",
        registry=registry,
        default_checks=settings.DEFAULT_EMAIL_CHECKS,
    )


def validate_luhn(record: HostRecord, field_name: str, options: OptionsLike = None) -> HostRecord:
    return validate_field(
        record,
        field_name,
        options,
        family="luhn",
        default_checks=DEFAULT_LUHN_CHECKS,
    )


def _country_family(
    record: HostRecord,
    field_name: str,
    options: OptionsLike,
    family: str,
    check_id: CheckId,
    check_factory,
) -> HostRecord:
    opts = coerce_options(options)
    if opts.country is None:
        raise CheckConfigurationError(f"{family} validation of '{field_name}' requires a country")
    registry = CheckRegistry({check_id: check_factory(opts.country)})
    return validate_field(
        record,
        field_name,
        opts,
        family=family,
        registry=registry,
        default_checks=[check_id.value],
    )


def validate_postal_code(record: HostRecord, field_name: str, options: OptionsLike = None) -> HostRecord:
    """Postal code against the ``country`` option's format."""
    return _country_family(
        record, field_name, options, "postal_code", CheckId.POSTAL_CODE, postal_code_check
    )


def validate_ssn(record: HostRecord, field_name: str, options: OptionsLike = None) -> HostRecord:
    """Social security number against the ``country`` option's format."""
    return _country_family(record, field_name, options, "ssn", CheckId.SSN, ssn_check)


def validate_string_starts_with(
    record: HostRecord,
    field_name: str,
    options: OptionsLike = None,
) -> HostRecord:
    """
    Value must start with ``prefix``, or with the pending value of
    ``prefix_field``. When ``prefix_field`` is itself unset there is nothing
    to compare against and the field is left alone.
    """
    opts: ValidationOptions = coerce_options(options)
    if (opts.prefix is None) == (opts.prefix_field is None):
        raise CheckConfigurationError(
            f"starts_with validation of '{field_name}' needs exactly one of prefix / prefix_field"
        )

    prefix = opts.prefix
    if opts.prefix_field is not None:
        sourced = record.get_pending_value(opts.prefix_field)
        if sourced is None:
            logger.debug("Prefix field '%s' unset, skipping '%s'", opts.prefix_field, field_name)
            return record
        prefix = _as_text(sourced)

    registry = CheckRegistry({CheckId.STARTS_WITH: starts_with_check(prefix)})
    return validate_field(
        record,
        field_name,
        opts,
        family="string",
        registry=registry,
        default_checks=[CheckId.STARTS_WITH.value],
    )
