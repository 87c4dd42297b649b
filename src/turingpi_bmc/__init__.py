"""Turing Pi 2 BMC API client."""

__version__ = "0.1.0"

from .client import BMCClient
from .const import DEFAULT_BASE_URL
from .envelope import parse_object, parse_scalar
from .exceptions import (
    AuthenticationError,
    BMCError,
    ConfigError,
    HTTPStatusError,
    ParseError,
    TransportError,
    ValidationError,
)
from .models import AuthType, BasicCredentials, BearerCredentials, OtherInfo, PowerState

__all__ = [
    "AuthType",
    "AuthenticationError",
    "BMCClient",
    "BMCError",
    "BasicCredentials",
    "BearerCredentials",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "HTTPStatusError",
    "OtherInfo",
    "ParseError",
    "PowerState",
    "TransportError",
    "ValidationError",
    "parse_object",
    "parse_scalar",
]
