"""
Value objects built from eNom responses
"""

from enom_client.models.contact import Contact, ContactRole, ENOM_CONTACT_PREFIXES
from enom_client.models.domain import Domain

__all__ = [
    "Contact",
    "ContactRole",
    "ENOM_CONTACT_PREFIXES",
    "Domain",
]
