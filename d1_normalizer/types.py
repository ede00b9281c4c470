"""
D1 Normalizer Types

Enums and constants for the audit-result document schema.
"""

from enum import Enum


class ScoreDisplayMode(str, Enum):
    """How an audit score is rendered"""

    BINARY = "binary"
    NUMERIC = "numeric"
    MANUAL = "manual"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "notApplicable"
    ERROR = "error"


class DetailsType(str, Enum):
    """Audit details payload types"""

    FILMSTRIP = "filmstrip"
    OPPORTUNITY = "opportunity"
    TABLE = "table"
    CRITICAL_REQUEST_CHAIN = "criticalrequestchain"
    SCREENSHOT = "screenshot"
    DEBUGDATA = "debugdata"


# Legacy tokens rewritten during normalization
LEGACY_NOT_APPLICABLE = "not_applicable"
LEGACY_DIAGNOSTIC = "diagnostic"
JPEG_DATA_URL_PREFIX = "data:image/jpeg;base64,"
