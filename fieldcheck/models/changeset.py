"""
Changeset — the host record validators read from and report to.

The engine consumes only two operations (``get_pending_value`` and
``push_error``, see ``HostRecord``); any object providing them can be
validated. ``Changeset`` is the bundled implementation.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable


@dataclass(frozen=True)
class FieldError:
    """One error entry attached to a field."""

    field: str
    message: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "metadata": dict(self.metadata),
        }


@runtime_checkable
class HostRecord(Protocol):
    """Boundary consumed by the validators."""

    def get_pending_value(self, field_name: str) -> Optional[Any]: ...

    def push_error(self, field_name: str, message: str, metadata: Dict[str, str]) -> "HostRecord": ...


@dataclass(frozen=True)
class Changeset:
    """Pending field changes plus the errors accumulated while validating them."""

    changes: Dict[str, Any] = field(default_factory=dict)
    errors: Tuple[FieldError, ...] = field(default=())

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def get_pending_value(self, field_name: str) -> Optional[Any]:
        """Pending value for *field_name*; None when unset or explicitly None."""
        return self.changes.get(field_name)

    def push_error(self, field_name: str, message: str, metadata: Dict[str, str]) -> "Changeset":
        """Return a copy with one more error entry."""
        entry = FieldError(field=field_name, message=message, metadata=dict(metadata))
        return replace(self, errors=self.errors + (entry,))

    def errors_for(self, field_name: str) -> List[FieldError]:
        return [e for e in self.errors if e.field == field_name]

    def to_dict(self) -> dict:
        return {
            "changes": dict(self.changes),
            "errors": [e.to_dict() for e in self.errors],
            "valid": self.valid,
        }

    def __repr__(self) -> str:
        return f"Changeset(changes={self.changes!r}, errors={len(self.errors)}, valid={self.valid})"
