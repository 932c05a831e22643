"""
eNom reseller API client: domains, contacts, registrar lock and auto renew
"""

from enom_client.api import (
    APIError,
    BaseTransport,
    DomainNotFoundError,
    DomainNotOwnedError,
    DomainNotRegisteredError,
    EnomClient,
    UnknownAPIError
)
from enom_client.models import Contact, ContactRole, Domain
from enom_client.services import ContactService, DomainService

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "BaseTransport",
    "DomainNotFoundError",
    "DomainNotOwnedError",
    "DomainNotRegisteredError",
    "EnomClient",
    "UnknownAPIError",
    "Contact",
    "ContactRole",
    "Domain",
    "ContactService",
    "DomainService",
]
