"""
Runs a rule set over a batch of records.

Reads:
  - validation_io/records.json   (list of {"id": ..., "changes": {...}})
  - validation_io/ruleset.json   (rule-set document, see fieldcheck.validation.ruleset)

Writes:
  - validation_io/validation_result.json
"""
import json
import logging
import sys
from pathlib import Path

from fieldcheck.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_validation")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "validation_io"

RECORDS_FILE = IO_DIR / "records.json"
RULESET_FILE = IO_DIR / "ruleset.json"
OUTPUT_FILE  = IO_DIR / "validation_result.json"

# ---------------------------------------------------------------------------
# Load inputs
# ---------------------------------------------------------------------------
logger.info("Loading inputs...")

with open(RECORDS_FILE, encoding="utf-8") as f:
    records: list = json.load(f)

with open(RULESET_FILE, encoding="utf-8") as f:
    ruleset_raw: str = f.read()

# ---------------------------------------------------------------------------
# Rule set (fails loudly on a malformed document)
# ---------------------------------------------------------------------------
from fieldcheck.validation.ruleset import RulesetError, apply_ruleset, load_ruleset

try:
    ruleset = load_ruleset(ruleset_raw)
except RulesetError as e:
    logger.error("Rule set rejected: %s", e.errors)
    sys.exit(2)

logger.info("records           : %d", len(records))
logger.info("rules             : %d", len(ruleset["rules"]))

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
from fieldcheck.models.changeset import Changeset

results = []
for item in records:
    changeset = apply_ruleset(Changeset(changes=item.get("changes", {})), ruleset)
    results.append({"id": item.get("id"), **changeset.to_dict()})

invalid = [r for r in results if not r["valid"]]
logger.info("Validation done: %d valid, %d invalid", len(results) - len(invalid), len(invalid))

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(results, f, ensure_ascii=False, indent=2)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("VALIDATION RESULT — SUMMARY")
print("=" * 70)
for r in results:
    status = "ok" if r["valid"] else f"{len(r['errors'])} error(s)"
    print(f"  {str(r['id']):20s} {status}")
    for err in r["errors"]:
        meta = err["metadata"]
        print(f"      {err['field']:16s} {err['message']}  [{meta['validation']}/{meta['check']}: {meta['reason']}]")
print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
