"""
Business logic and service layer
"""

from enom_client.services.contact_service import ContactService, normalize_contacts
from enom_client.services.domain_service import DomainService

__all__ = [
    "ContactService",
    "DomainService",
    "normalize_contacts",
]
