"""
Custom exceptions for the GiveHub client library.

This module defines the hierarchy of exceptions raised by the client so that
callers can tell transport failures, API errors and local misconfiguration
apart.
"""

from typing import Any, Dict, Optional


class GiveHubError(Exception):
    """Base exception for all GiveHub client errors."""

    pass


class ApiError(GiveHubError):
    """Raised when the API answers with a status code >= 400."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize ApiError.

        Args:
            message: Error message, taken from the response ``error`` field
                when the server provides one
            status_code: HTTP status code of the failed response
            details: Decoded response body, if any
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={self.message!r})"


class TransportError(ApiError):
    """Raised when no HTTP status was obtained (connection, timeout, TLS)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=0)


class AuthenticationError(GiveHubError):
    """Raised when the local authentication state cannot serve a request."""

    pass


class ConfigurationError(GiveHubError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(GiveHubError):
    """Raised by workflow helpers when input data fails local checks."""

    pass
