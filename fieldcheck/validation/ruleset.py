"""
Rule Sets — declarative field validation loaded from JSON.

A rule set lists which validation family applies to which fields::

    {
        "version": 1,
        "rules": [
            {"validator": "email", "fields": ["email"], "options": {"checks": ["pow", "burner"]}},
            {"validator": "postal_code", "fields": ["zip"], "options": {"country": "fr"}}
        ]
    }

Stages:
    1. JSON parse (documents may be given as str or dict)
    2. Schema conformance (jsonschema, RULESET_SCHEMA)
    3. Option parsing (ValidationOptions)
    4. Application, rule by rule, through validate_many
"""
import json
import logging
from typing import Dict, List

from jsonschema import ValidationError, validate
from pydantic import ValidationError as OptionsValidationError

from fieldcheck.checks.registry import CheckConfigurationError
from fieldcheck.config.schemas import RULESET_SCHEMA
from fieldcheck.models.changeset import HostRecord
from fieldcheck.models.options import ValidationOptions
from fieldcheck.validation.batch import FieldValidator, validate_many
from fieldcheck.validation.orchestrator import (
    validate_email,
    validate_luhn,
    validate_postal_code,
    validate_ssn,
    validate_string_starts_with,
)

logger = logging.getLogger(__name__)

VALIDATORS: Dict[str, FieldValidator] = {
    "email": validate_email,
    "luhn": validate_luhn,
    "postal_code": validate_postal_code,
    "ssn": validate_ssn,
    "starts_with": validate_string_starts_with,
}


class RulesetError(CheckConfigurationError):
    """Raised when a rule-set document cannot be used."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid rule set: {errors}")


def load_ruleset(ruleset: str | dict) -> dict:
    """
    Parse and schema-check a rule-set document.

    Raises:
        RulesetError: invalid JSON, schema violation, or bad options.
    """
    if isinstance(ruleset, dict):
        data = ruleset
    else:
        try:
            data = json.loads(ruleset)
        except json.JSONDecodeError as e:
            raise RulesetError([f"Invalid JSON: {e}"]) from e

    try:
        validate(instance=data, schema=RULESET_SCHEMA["schema"])
    except ValidationError as e:
        raise RulesetError([f"Schema violation: {e.message}"]) from e

    # Parse options now so a bad rule is reported before any record is touched
    errors: List[str] = []
    for i, rule in enumerate(data["rules"]):
        try:
            ValidationOptions.model_validate(rule.get("options", {}))
        except OptionsValidationError as e:
            errors.append(f"rules[{i}].options: {e.errors()[0]['msg']}")
    if errors:
        raise RulesetError(errors)

    return data


def apply_ruleset(record: HostRecord, ruleset: str | dict) -> HostRecord:
    """Apply every rule of *ruleset* to *record*, in document order."""
    data = load_ruleset(ruleset)

    for rule in data["rules"]:
        validator_fn = VALIDATORS[rule["validator"]]
        options = ValidationOptions.model_validate(rule.get("options", {}))
        logger.debug("Applying %s rule to %s", rule["validator"], rule["fields"])
        record = validate_many(record, rule["fields"], validator_fn, options)

    return record
