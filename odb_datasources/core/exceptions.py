from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class Diagnostic:
    """Human-readable error report for a failed read (summary + detail)."""
    summary: str
    detail: str
    severity: str = "error"


class OdbDataSourceError(Exception):
    """Base exception for all ODB data source errors."""
    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

class ConfigurationError(OdbDataSourceError):
    """Raised when application configuration is invalid or missing."""
    def __init__(self, message: str, code: str = "config_error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)

class ConfigValidationError(OdbDataSourceError):
    """Raised when a data source configuration fails validation before any remote call."""
    def __init__(self, message: str, code: str = "validation_error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)

class UnknownDataSourceError(OdbDataSourceError):
    """Raised when no data source is registered for a type name."""
    def __init__(self, message: str, code: str = "unknown_data_source", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)

class ReadError(OdbDataSourceError):
    """
    Raised when a data source read aborts.

    Carries exactly one diagnostic naming the action, the data source,
    the identifier and the underlying cause.
    """
    def __init__(
        self,
        message: str,
        code: str = "read_error",
        details: Optional[Dict[str, Any]] = None,
        cause_text: str = "",
    ):
        super().__init__(message, code=code, details=details)
        self.diagnostic = Diagnostic(summary=message, detail=cause_text or message)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [self.diagnostic]

class LookupFailedError(ReadError):
    """Raised when the primary Get* call fails or times out."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause_text: str = ""):
        super().__init__(message, code="lookup_failed", details=details, cause_text=cause_text)

class TagLookupFailedError(ReadError):
    """Raised when listing the resource tags fails."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause_text: str = ""):
        super().__init__(message, code="tag_lookup_failed", details=details, cause_text=cause_text)
