"""Error types for schema discovery."""

from typing import Optional, Dict, Any


class SchemaCLIError(Exception):
    """Base exception for schema-cli errors."""

    def __init__(self, message: str, code: str = "SCHEMA_CLI_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class CatalogQueryError(SchemaCLIError):
    """A catalog query could not be executed or its rows could not be decoded.

    Covers transport failures, engine-side rejections (permissions, missing
    catalog views), statement timeouts and result rows of unexpected shape.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CATALOG_QUERY_ERROR", details=details)
