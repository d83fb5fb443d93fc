"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Email checks ---
DEFAULT_EMAIL_CHECKS: list = [
    c.strip()
    for c in os.getenv("FIELDCHECK_DEFAULT_EMAIL_CHECKS", "pow").split(",")
    if c.strip()
]

# --- Burner oracle ---
BURNER_DOMAINS_FILE: str = os.getenv("FIELDCHECK_BURNER_DOMAINS_FILE", "")
BURNER_REDIS_KEY: str = os.getenv("FIELDCHECK_BURNER_REDIS_KEY", "fieldcheck:burner_domains")

# --- Observability ---
METRICS_ENABLED: bool = os.getenv("FIELDCHECK_METRICS_ENABLED", "true").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
