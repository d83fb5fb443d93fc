"""
JSON Schemas for declarative rule sets.

RULESET_SCHEMA — what a rule-set document must look like before any of its
rules is applied to a record. Option payloads are further checked by the
ValidationOptions pydantic model.
"""

VALIDATOR_NAMES: list = [
    "email",
    "luhn",
    "postal_code",
    "ssn",
    "starts_with",
]

RULESET_SCHEMA: dict = {
    "name": "fieldcheck_ruleset_v1",
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["rules"],
        "properties": {
            "version": {
                "type": "integer",
                "minimum": 1,
                "description": "Rule-set format version",
            },
            "rules": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["validator", "fields"],
                    "properties": {
                        "validator": {
                            "type": "string",
                            "enum": VALIDATOR_NAMES,
                            "description": "Validation family applied to every field",
                        },
                        "fields": {
                            "type": "array",
                            "minItems": 1,
                            "items": {"type": "string", "minLength": 1},
                            "description": "Field names, validated in list order",
                        },
                        "options": {
                            "type": "object",
                            "additionalProperties": False,
                            "properties": {
                                "checks": {
                                    "type": "array",
                                    "items": {"type": "string", "minLength": 1},
                                    "uniqueItems": True,
                                },
                                "message": {"type": "string"},
                                "country": {"type": "string", "minLength": 2},
                                "prefix": {"type": "string"},
                                "prefix_field": {"type": "string", "minLength": 1},
                            },
                        },
                    },
                },
            },
        },
    },
}
