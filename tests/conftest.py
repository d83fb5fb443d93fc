"""
Shared test fixtures for the field validation test suite.
"""
import pytest

from fieldcheck.models.changeset import Changeset


# ==========================================================================
# Changesets
# ==========================================================================

@pytest.fixture
def valid_email_changeset():
    return Changeset(changes={"email": "valid.email@example.com"})


@pytest.fixture
def invalid_email_changeset():
    return Changeset(changes={"email": "@invalid_email"})


@pytest.fixture
def burner_email_changeset():
    return Changeset(changes={"email": "uses_a_forbidden_provider@yopmail.net"})


@pytest.fixture
def signup_changeset():
    return Changeset(
        changes={
            "email": "mario.rossi@example.it",
            "backup_email": "mario..rossi@example.it",
            "zip": "75001",
            "card": "4539 1488 0343 6467",
            "country_code": "FR",
            "vat": "FR40303265045",
        }
    )


# ==========================================================================
# Burner oracles
# ==========================================================================

class FakeRedis:
    """Minimal in-memory stand-in exposing the calls the oracle makes."""

    def __init__(self, sets=None):
        self.sets = {k: set(v) for k, v in (sets or {}).items()}
        self.calls = []

    def sismember(self, key, member):
        self.calls.append((key, member))
        return member in self.sets.get(key, set())


class FailingRedis:
    def sismember(self, key, member):
        raise ConnectionError("Redis down")


@pytest.fixture
def fake_redis():
    return FakeRedis({"burners": {"throwaway.test", "yopmail.net"}})


@pytest.fixture
def failing_redis():
    return FailingRedis()


# ==========================================================================
# Rule sets
# ==========================================================================

@pytest.fixture
def signup_ruleset():
    return {
        "version": 1,
        "rules": [
            {
                "validator": "email",
                "fields": ["email", "backup_email"],
                "options": {"checks": ["pow", "burner"]},
            },
            {
                "validator": "postal_code",
                "fields": ["zip"],
                "options": {"country": "fr"},
            },
            {
                "validator": "luhn",
                "fields": ["card"],
            },
            {
                "validator": "starts_with",
                "fields": ["vat"],
                "options": {"prefix_field": "country_code"},
            },
        ],
    }
