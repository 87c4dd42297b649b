"""
Turing Pi BMC API Exceptions

Exception classes raised by the BMC client.
"""

from typing import Optional


class BMCError(Exception):
    """Base exception for all BMC API errors."""
    pass


class ConfigError(BMCError, ValueError):
    """Raised when the client is configured with an unsupported auth type."""
    pass


class ValidationError(BMCError, ValueError):
    """Raised when a node or power state argument is out of range."""
    pass


class AuthenticationError(BMCError):
    """Raised when the BMC rejects the credentials or issues no token."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(BMCError):
    """Raised when a request cannot be sent or its body cannot be read."""
    pass


class HTTPStatusError(BMCError):
    """Raised when the BMC answers a call with a non-200 status."""

    def __init__(self, message: str, status_code: int, reason: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason

    @property
    def status(self) -> str:
        """Status line, e.g. ``404 Not Found``."""
        return f"{self.status_code} {self.reason}".strip()


class ParseError(BMCError):
    """Raised when a response body is not a well-formed BMC envelope."""
    pass
