"""
API Layer - eNom transport, response schemas and error rules
"""

# Base Transport
from enom_client.api.base_transport import BaseTransport

# Transport Implementation
from enom_client.api.enom_client import EnomClient

# Exceptions
from enom_client.api.exceptions import (
    APIError,
    AuthenticationError,
    DomainNotFoundError,
    DomainNotOwnedError,
    DomainNotRegisteredError,
    UnknownAPIError,
    RateLimitError,
    InvalidDomainError,
    NetworkError,
    ServerError,
    ResponseParseError
)

__all__ = [
    # Base
    "BaseTransport",

    # Transport
    "EnomClient",

    # Exceptions
    "APIError",
    "AuthenticationError",
    "DomainNotFoundError",
    "DomainNotOwnedError",
    "DomainNotRegisteredError",
    "UnknownAPIError",
    "RateLimitError",
    "InvalidDomainError",
    "NetworkError",
    "ServerError",
    "ResponseParseError"
]
