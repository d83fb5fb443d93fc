"""
EmailAddress — transient local-part / domain split of an address.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailAddress:
    """Result of splitting an address on its last ``@``."""

    local_part: str         # everything before the last "@", may itself contain "@"
    domain: str             # everything after it, may be empty

    def __str__(self) -> str:
        return f"{self.local_part}@{self.domain}"
