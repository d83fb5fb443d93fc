"""
Typed Pydantic model for per-call validation options.

Replaces free-form keyword options: only the recognised keys are accepted,
anything else is rejected at construction time.
"""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fieldcheck.models.outcome import CheckId


class ValidationOptions(BaseModel):
    """
    Options read by one validation call, discarded afterwards.

    ``checks`` left as None means "use the family default" (``pow`` for
    email); an explicit empty list runs nothing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    checks: Optional[List[str]] = Field(None, description="Ordered, unique check identifiers.")
    message: Optional[str] = Field(None, description="Replaces the text of every failure of the call.")
    country: Optional[str] = Field(None, min_length=2, description="Rule table for postal code / SSN checks.")
    prefix: Optional[str] = Field(None, description="Literal prefix for starts_with.")
    prefix_field: Optional[str] = Field(None, min_length=1, description="Field holding the expected prefix.")

    @field_validator("checks", mode="before")
    @classmethod
    def normalize_checks(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, (str, CheckId)):
            raise ValueError("checks must be a list of identifiers, not a single string")
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"checks must be a list of identifiers, got {type(v).__name__}")
        bad = [c for c in v if not isinstance(c, str)]
        if bad:
            raise ValueError(f"check identifiers must be strings, got {bad}")
        normalized = [c.value if isinstance(c, CheckId) else c for c in v]
        if len(set(normalized)) != len(normalized):
            raise ValueError(f"duplicate check identifiers in {normalized}")
        return normalized

    @field_validator("country")
    @classmethod
    def lower_country(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v is not None else v

    def checks_or(self, default: List[str]) -> List[str]:
        """Requested checks, or *default* when none were given."""
        return list(self.checks) if self.checks is not None else list(default)


OptionsLike = Union[ValidationOptions, dict, None]


def coerce_options(options: OptionsLike) -> ValidationOptions:
    """Accept a ValidationOptions, a plain dict, or None."""
    if options is None:
        return ValidationOptions()
    if isinstance(options, ValidationOptions):
        return options
    return ValidationOptions.model_validate(options)
