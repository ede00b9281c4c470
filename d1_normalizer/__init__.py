"""
D1 Normalizer - Audit result backward compatibility

Rewrites audit-result documents from older schema versions into the current
shape so report renderers only deal with one layout.
"""

from .normalizer import ResultNormalizer, prepare_report_result
from .rules import DEFAULT_RULES, MigrationRule
from .types import DetailsType, ScoreDisplayMode

__all__ = [
    "ResultNormalizer",
    "prepare_report_result",
    "MigrationRule",
    "DEFAULT_RULES",
    "DetailsType",
    "ScoreDisplayMode",
]
