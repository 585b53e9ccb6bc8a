"""
Catalog error taxonomy and the result wrapper returned by catalog clients.

Clients never let these errors escape their public operations; they return a
CatalogResult instead and the caller decides what to show or retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class CatalogError(Exception):
    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(CatalogError):
    """Required configuration (base URL, API key) is missing or invalid."""


class ValidationError(CatalogError):
    """Caller input rejected before any network call."""

    def __init__(self, message: str, *, errors: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or {}


class TransportError(CatalogError):
    """Network failure or timeout talking to the Catalog API."""

    retryable = True

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class UpstreamError(CatalogError):
    """The Catalog API answered with a non-200 status."""

    TRANSIENT_STATUSES = frozenset({429, 502, 503, 504})

    def __init__(self, status_code: int, message: str, *, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code in self.TRANSIENT_STATUSES


class ParseError(CatalogError):
    """The Catalog API returned a body that breaks the JSON contract."""


@dataclass(frozen=True)
class CatalogResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "CatalogResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CatalogError) -> "CatalogResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
