"""Error handling helpers for catalog operations."""
from typing import Any, Dict
import logging

from pyapi_catalog.integrations.contracts.errors import (
    CatalogError,
    ConfigError,
    ParseError,
    TransportError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    ConfigError: 503,
    ValidationError: 422,
    TransportError: 504,
    UpstreamError: 502,
    ParseError: 502,
}


class ErrorHandler:
    def to_payload(self, error: CatalogError) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {}
        if isinstance(error, ValidationError):
            metadata["errors"] = dict(error.errors)
        elif isinstance(error, UpstreamError):
            metadata["upstream_status"] = error.status_code
            metadata["detail"] = error.detail
        return {
            "message": error.message,
            "error_type": type(error).__name__,
            "retryable": error.retryable,
            "metadata": metadata,
        }

    def status_code(self, error: CatalogError) -> int:
        for error_type, code in _STATUS_CODES.items():
            if isinstance(error, error_type):
                return code
        return 500

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in catalog request: %s", exc, exc_info=True)
        return {
            "message": "An internal error occurred while processing your request. Please try again later.",
            "error_type": "InternalError",
            "retryable": False,
            "metadata": {"error": str(exc), "context": context or {}},
        }
