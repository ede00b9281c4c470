"""Core utilities and configuration for the report utilities"""
from core.config import get_settings
from core.exceptions import InvalidHostError, ReportUtilError, ValidationError
from core.logging import get_logger

__all__ = [
    "get_settings",
    "get_logger",
    "ReportUtilError",
    "ValidationError",
    "InvalidHostError",
]
