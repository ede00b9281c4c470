"""
Custom exceptions for the report utilities
Provides structured error handling across all domains
"""
from typing import Any, Dict, Optional


class ReportUtilError(Exception):
    """Base exception for all report utility errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for renderer error panels"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ReportUtilError):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **details} if field else details,
        )


class ConfigurationError(ReportUtilError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
        )


class InvalidHostError(ReportUtilError):
    """Raised when a value cannot be parsed as a hostname or URL"""

    def __init__(self, value: Any, reason: Optional[str] = None):
        message = f"Invalid host: {value!r}"
        if reason:
            message += f" ({reason})"

        super().__init__(
            message=message,
            error_code="INVALID_HOST",
            details={"value": str(value), "reason": reason},
        )
        self.value = value
