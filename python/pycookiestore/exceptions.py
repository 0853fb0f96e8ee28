"""Exceptions raised by the cookie store."""

from typing import Any


class CookieStoreError(Exception):
    """Base class for all cookie store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class MalformedRequestError(CookieStoreError, ValueError):
    """A required request field is missing or has the wrong type."""


class MethodNotImplementedError(CookieStoreError):
    """The dispatcher received an unknown method name."""


class BackingStoreError(CookieStoreError):
    """The backend failed while serving an operation."""


class BackingStoreTimeoutError(BackingStoreError, TimeoutError):
    """The backend did not complete within the configured timeout."""


class StoreClosedError(CookieStoreError):
    """The store was used after it was closed."""


class BuilderError(CookieStoreError, ValueError):
    """A store builder was misconfigured or reused."""
