"""
Shared test fixture data

Sample audit-result documents in the current schema.
"""
import copy
import json
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent

_sample_result = json.loads((FIXTURES_DIR / "sample_result.json").read_text(encoding="utf-8"))


def load_sample_result() -> dict:
    """Return a fresh deep copy of the current-schema sample result"""
    return copy.deepcopy(_sample_result)
