"""
Legacy-schema migration rules

Each rule corrects one quirk of an older audit-result schema. Rules mutate
the document they are given, return it, and are no-ops on documents that
already use the current shape.
"""

from dataclasses import dataclass
from typing import Any, Callable

from core.logging import get_logger
from d1_normalizer.types import (
    JPEG_DATA_URL_PREFIX,
    LEGACY_DIAGNOSTIC,
    LEGACY_NOT_APPLICABLE,
    DetailsType,
    ScoreDisplayMode,
)

logger = get_logger(__name__, domain="d1")

Document = dict[str, Any]


@dataclass(frozen=True)
class MigrationRule:
    """A named, independent correction applied to an audit-result document"""

    name: str
    apply: Callable[[Document], Document]
    description: str = ""

    def __call__(self, document: Document) -> Document:
        return self.apply(document)


def _iter_audits(document: Document):
    for audit in document["audits"].values():
        if isinstance(audit, dict):
            yield audit


def _iter_audit_refs(document: Document):
    for category in (document.get("categories") or {}).values():
        if not isinstance(category, dict):
            continue
        for audit_ref in category.get("auditRefs") or []:
            yield audit_ref


def migrate_score_display_mode(document: Document) -> Document:
    """Rewrite underscored `not_applicable` to `notApplicable`"""
    corrected = 0
    for audit in _iter_audits(document):
        if audit.get("scoreDisplayMode") == LEGACY_NOT_APPLICABLE:
            audit["scoreDisplayMode"] = ScoreDisplayMode.NOT_APPLICABLE.value
            corrected += 1

    if corrected:
        logger.debug(f"Corrected scoreDisplayMode on {corrected} audits")
    return document


def migrate_details_type(document: Document) -> Document:
    """Missing and `diagnostic` details types become `debugdata`"""
    corrected = 0
    for audit in _iter_audits(document):
        details = audit.get("details")
        if not isinstance(details, dict):
            continue
        if "type" not in details or details["type"] is None or details["type"] == LEGACY_DIAGNOSTIC:
            details["type"] = DetailsType.DEBUGDATA.value
            corrected += 1

    if corrected:
        logger.debug(f"Corrected details.type on {corrected} audits")
    return document


def migrate_filmstrip_data_urls(document: Document) -> Document:
    """Strip the jpeg data URL prefix from filmstrip screenshots"""
    corrected = 0
    for audit in _iter_audits(document):
        details = audit.get("details")
        if not isinstance(details, dict) or details.get("type") != DetailsType.FILMSTRIP.value:
            continue
        for item in details.get("items") or []:
            data = item.get("data")
            if isinstance(data, str) and data.startswith(JPEG_DATA_URL_PREFIX):
                item["data"] = data[len(JPEG_DATA_URL_PREFIX) :]
                corrected += 1

    if corrected:
        logger.debug(f"Stripped data URL prefix from {corrected} filmstrip frames")
    return document


def fan_out_stack_packs(document: Document) -> Document:
    """
    Attach matching stack pack descriptions to every audit ref.

    `auditRef.stackPacks` is rebuilt from `document["stackPacks"]` on every
    pass, so repeated normalization does not duplicate entries. Refs without
    a matching description are left without the key.
    """
    stack_packs = document.get("stackPacks")
    if not stack_packs:
        return document

    attached = 0
    for audit_ref in _iter_audit_refs(document):
        entries = []
        for pack in stack_packs:
            description = (pack.get("descriptions") or {}).get(audit_ref.get("id"))
            if not description:
                continue
            entries.append(
                {
                    "title": pack.get("title"),
                    "iconDataURL": pack.get("iconDataURL"),
                    "description": description,
                }
            )

        if entries:
            audit_ref["stackPacks"] = entries
            attached += 1

    logger.debug(f"Attached stack pack descriptions to {attached} audit refs")
    return document


DEFAULT_RULES: tuple[MigrationRule, ...] = (
    MigrationRule(
        name="score-display-mode",
        apply=migrate_score_display_mode,
        description="not_applicable -> notApplicable",
    ),
    MigrationRule(
        name="details-type",
        apply=migrate_details_type,
        description="missing or diagnostic details.type -> debugdata",
    ),
    MigrationRule(
        name="filmstrip-data-url",
        apply=migrate_filmstrip_data_urls,
        description="strip data:image/jpeg;base64, from filmstrip frames",
    ),
    MigrationRule(
        name="stack-pack-fan-out",
        apply=fan_out_stack_packs,
        description="copy stack pack descriptions onto audit refs",
    ),
)
