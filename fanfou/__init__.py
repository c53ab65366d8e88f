"""
fanfou - Fanfou API Client
A Python client for the OAuth1-authenticated Fanfou REST API.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .aio import AsyncFanfouClient
from .auth import Auth, Credentials
from .client import FanfouClient
from .endpoints import ENDPOINTS, Endpoint
from .errors import APIError, AuthError, DecodeError, FanfouError, TransportError, ValidationError
from .response import Response, classify

__all__ = [
    "FanfouClient",
    "AsyncFanfouClient",
    "Auth",
    "Credentials",
    "Endpoint",
    "ENDPOINTS",
    "Response",
    "classify",
    "FanfouError",
    "AuthError",
    "ValidationError",
    "TransportError",
    "APIError",
    "DecodeError",
]
