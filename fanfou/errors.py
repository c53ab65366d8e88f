"""
Error types returned (or raised) by the Fanfou client.
"""
from typing import Optional


class FanfouError(Exception):
    """Base exception for all library errors."""


class AuthError(FanfouError):
    """Raised when consumer or access token material is missing or rejected."""


class ValidationError(FanfouError):
    """Request parameters were rejected before anything was sent."""


class TransportError(FanfouError):
    """No HTTP response was received."""


class APIError(FanfouError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, request: Optional[str] = None):
        super().__init__('HTTP {}: {}'.format(status_code, message))
        self.status_code = status_code
        self.message = message
        self.request = request

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class DecodeError(FanfouError):
    """A 2xx response whose body does not have the expected shape."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body
