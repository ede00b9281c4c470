"""
Second-level suffix table

The table lists second-level labels that do not register domains themselves
(`co` in `co.uk`, `com` in `com.br`). It is read once and shared read-only.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

from core.config import get_settings
from core.exceptions import ConfigurationError
from core.logging import get_logger

logger = get_logger(__name__, domain="d2")

PACKAGED_TABLE = "second_level_labels.json"


@dataclass(frozen=True)
class SuffixTable:
    """Immutable set of second-level labels that form compound suffixes"""

    second_level_labels: frozenset[str]

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> "SuffixTable":
        normalized = set()
        for label in labels:
            if not isinstance(label, str) or not label.strip(". "):
                raise ConfigurationError(f"Invalid suffix table entry: {label!r}", setting="suffix_table_path")
            normalized.add(label.strip(". ").lower())
        return cls(frozenset(normalized))

    def __contains__(self, label: str) -> bool:
        return label in self.second_level_labels

    def __len__(self) -> int:
        return len(self.second_level_labels)


def _read_labels(path: Optional[str]) -> list:
    try:
        if path:
            raw = Path(path).read_text(encoding="utf-8")
        else:
            raw = (resources.files("d2_domains") / "data" / PACKAGED_TABLE).read_text(encoding="utf-8")
        labels = json.loads(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load suffix table: {e}", setting="suffix_table_path") from e

    if not isinstance(labels, list):
        raise ConfigurationError("Suffix table must be a JSON array of labels", setting="suffix_table_path")
    return labels


def load_suffix_table(path: Optional[str] = None) -> SuffixTable:
    """Load a suffix table from `path`, or from the packaged data file"""
    table = SuffixTable.from_labels(_read_labels(path))
    logger.debug(f"Loaded suffix table with {len(table)} labels from {path or PACKAGED_TABLE}")
    return table


@lru_cache()
def get_suffix_table() -> SuffixTable:
    """Get the process-wide suffix table, honouring `suffix_table_path`"""
    return load_suffix_table(get_settings().suffix_table_path)
