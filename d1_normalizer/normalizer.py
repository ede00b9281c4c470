"""
Report result normalizer

Brings an audit-result document produced by any supported schema version
up to the current shape, in place.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from core.exceptions import ValidationError
from core.logging import get_logger
from d1_normalizer.rules import DEFAULT_RULES, Document, MigrationRule

logger = get_logger(__name__, domain="d1")


class ResultNormalizer:
    """Applies an ordered sequence of migration rules to audit-result documents"""

    def __init__(self, rules: Sequence[MigrationRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

        names = [rule.name for rule in self.rules]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate migration rule names: {names}")

    def with_rule(self, rule: MigrationRule) -> "ResultNormalizer":
        """Return a new normalizer with `rule` appended"""
        return ResultNormalizer([*self.rules, rule])

    def normalize(self, document: Document) -> Document:
        """
        Normalize an audit-result document.

        Args:
            document: Audit-result document, current or legacy shape

        Returns:
            The same document object, rewritten to the current schema

        Raises:
            ValidationError: If the document has no `audits` mapping
        """
        self._validate_container(document)

        for rule in self.rules:
            result = rule(document)
            if result is not document:
                raise TypeError(f"Migration rule {rule.name!r} must return the document it was given")

        return document

    @staticmethod
    def _validate_container(document: Any) -> None:
        if not isinstance(document, Mapping):
            raise ValidationError("Audit result document must be a mapping", field="document")

        if not isinstance(document.get("audits"), Mapping):
            logger.error("Audit result document is missing its audits map")
            raise ValidationError("Audit result document has no audits map", field="audits")


_default_normalizer = ResultNormalizer()


def prepare_report_result(document: Document) -> Document:
    """Normalize `document` with the default rule set"""
    return _default_normalizer.normalize(document)
