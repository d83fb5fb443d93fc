"""
Burner Provider Check — rejects disposable email providers.

The check itself only asks an oracle ``is_burner(address_or_domain) -> bool``.
Two oracles are provided:

1. ``is_burner``          — built-in seed list, optionally extended by a
                            newline-delimited file (FIELDCHECK_BURNER_DOMAINS_FILE)
2. ``RedisBurnerOracle``  — membership in a Redis set, client injected

Either way a domain matches when it, or any of its parent domains, is listed
(``mx.yopmail.net`` is a burner because ``yopmail.net`` is).
"""
import logging
from pathlib import Path
from typing import Any, Callable, FrozenSet, List, Optional

from fieldcheck.config import settings
from fieldcheck.config.constants import BURNER_DOMAINS, MSG_FORBIDDEN_PROVIDER
from fieldcheck.models.outcome import CheckOutcome, FailureCategory, FailureReason

logger = logging.getLogger(__name__)

BurnerOracle = Callable[[str], bool]

# Lazy-loaded domain table (seed + optional file)
_burner_domains: Optional[FrozenSet[str]] = None


def _load_domains_file(path: str) -> FrozenSet[str]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return frozenset(
        line.strip().lower()
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    )


def _get_burner_domains() -> FrozenSet[str]:
    """Build the domain table once, on first use."""
    global _burner_domains
    if _burner_domains is None:
        domains = BURNER_DOMAINS
        if settings.BURNER_DOMAINS_FILE:
            try:
                extra = _load_domains_file(settings.BURNER_DOMAINS_FILE)
                domains = domains | extra
                logger.info(
                    "Loaded %d burner domains from %s",
                    len(extra),
                    settings.BURNER_DOMAINS_FILE,
                )
            except OSError as e:
                logger.warning(
                    "Burner domains file '%s' unreadable (%s), using built-in list only",
                    settings.BURNER_DOMAINS_FILE,
                    e,
                )
        _burner_domains = domains
    return _burner_domains


def domain_of(address_or_domain: str) -> str:
    """
    Lower-cased text after the last ``@`` (the whole input if there is none),
    without the trailing root dot.
    """
    return address_or_domain.rpartition("@")[2].strip().lower().rstrip(".")


def candidate_domains(domain: str) -> List[str]:
    """
    The domain and its parents that still contain a dot.

    ``a.b.example.com`` → ``["a.b.example.com", "b.example.com", "example.com"]``
    """
    labels = domain.split(".")
    return [".".join(labels[i:]) for i in range(len(labels) - 1)] or [domain]


def is_burner(address_or_domain: str) -> bool:
    """Default oracle backed by the static domain table."""
    domain = domain_of(address_or_domain)
    if not domain:
        return False
    known = _get_burner_domains()
    return any(d in known for d in candidate_domains(domain))


class RedisBurnerOracle:
    """
    Oracle backed by a Redis set of burner domains.

    Any client exposing ``sismember(key, member)`` works. Lookup errors are
    not swallowed: a Redis outage surfaces to the caller instead of letting
    disposable addresses through.
    """

    def __init__(self, redis_client: Any, key: str = settings.BURNER_REDIS_KEY):
        self.redis_client = redis_client
        self.key = key

    def __call__(self, address_or_domain: str) -> bool:
        domain = domain_of(address_or_domain)
        if not domain:
            return False
        return any(
            bool(self.redis_client.sismember(self.key, d))
            for d in candidate_domains(domain)
        )

    def __repr__(self) -> str:
        return f"RedisBurnerOracle(key={self.key!r})"


def burner_check(oracle: BurnerOracle = is_burner) -> Callable[[str], CheckOutcome]:
    """Wrap *oracle* into a check function."""

    def check(value: str) -> CheckOutcome:
        if oracle(value):
            return CheckOutcome.failure(
                FailureReason.of(FailureCategory.FORBIDDEN_PROVIDER, MSG_FORBIDDEN_PROVIDER)
            )
        return CheckOutcome.success()

    return check
