"""
Contact Service
Reads and updates the four contacts of a domain
"""

from typing import Any, Dict, Mapping, Optional

from enom_client.api.exceptions import DomainNotFoundError
from enom_client.api.responses import ContactsBlock, GetContactsResponse
from enom_client.models import Contact, ContactRole
from enom_client.utils.logger import get_logger
from enom_client.services.base_service import BaseService

logger = get_logger(__name__)


def strip_role_prefix(raw_record: Mapping[str, Any], prefix: str) -> Dict[str, str]:
    """
    Turn one role's prefixed fields into a common record.

    {"RegistrantEmailAddress": "a@b.c"} with prefix "Registrant" becomes
    {"EmailAddress": "a@b.c"}. Fields of other roles are ignored and empty
    values become "".
    """
    record = {}
    for field, value in raw_record.items():
        if not field.startswith(prefix) or field == prefix:
            continue

        record[field[len(prefix):]] = value if isinstance(value, str) else ""

    return record


def normalize_contacts(
    block: ContactsBlock,
    self_party_id: Optional[str]
) -> Dict[ContactRole, Contact]:
    """
    Build all four contacts from a <GetContacts> block.

    When a contact was never given eNom fills the role with the reseller's
    own details. Any role whose PartyID equals ``self_party_id`` is such a
    placeholder and is replaced by a copy of the registrant.

    Args:
        block: Parsed <GetContacts> block
        self_party_id: The reseller's own billing party id

    Returns:
        Mapping with every ContactRole

    Raises:
        DomainNotFoundError: If the response has no genuine registrant
    """
    contacts: Dict[ContactRole, Contact] = {}

    for role in ContactRole:
        record = strip_role_prefix(block.role_record(role.enom_prefix), role.enom_prefix)

        if not record:
            continue

        if self_party_id and record.get("PartyID") == self_party_id:
            logger.debug(f"{role.value} is the reseller placeholder, ignoring it")
            continue

        contacts[role] = Contact.construct_from_response(record)

    registrant = contacts.get(ContactRole.REGISTRANT)
    if registrant is None:
        logger.error("GetContacts response has no registrant contact")
        raise DomainNotFoundError("Response did not contain a registrant contact")

    for role in ContactRole:
        if role not in contacts:
            contacts[role] = registrant.model_copy(deep=True)

    return contacts


class ContactService(BaseService):
    """
    Contact operations for domains in the reseller account.
    """

    def get_contacts_by_domain_name(self, domain_name: str) -> Dict[ContactRole, Contact]:
        """
        Get the registrant, admin, technical and billing contacts of a domain.

        Roles that were never given separately come back as copies of the
        registrant.

        Args:
            domain_name: FQDN

        Returns:
            Mapping of ContactRole -> Contact with all four roles

        Raises:
            DomainNotFoundError: If the domain is not in your account
            UnknownAPIError: For any other reported error
        """
        domain_name = self._validated(domain_name)
        logger.info(f"Getting contacts for: {domain_name}")

        response: GetContactsResponse = self._submit(
            "GetContacts", domain_name, {"Domain": domain_name}
        )

        if response.contacts is None:
            raise DomainNotFoundError("Response did not contain contact data")

        return normalize_contacts(response.contacts, response.contacts.billing_party_id)

    def update_contacts_for_domain_name(
        self,
        domain_name: str,
        registrant_contact: Optional[Contact] = None,
        admin_contact: Optional[Contact] = None,
        technical_contact: Optional[Contact] = None,
        billing_contact: Optional[Contact] = None
    ) -> Dict[ContactRole, Contact]:
        """
        Replace some or all contacts of a domain.

        When all four contacts are given they are replaced in one request,
        otherwise one request is sent per given contact. Contacts that are not
        given are left as they are.

        If a request fails the remaining ones are not sent and the ones
        already applied are not undone; fetch the contacts again to see what
        the domain ended up with.

        Args:
            domain_name: FQDN
            registrant_contact: New registrant (optional)
            admin_contact: New admin contact (optional)
            technical_contact: New technical contact (optional)
            billing_contact: New billing contact (optional)

        Returns:
            The domain's contacts after the update (see get_contacts_by_domain_name)

        Raises:
            ValueError: If no contact is given
            DomainNotFoundError: If the domain is not in your account
            UnknownAPIError: For any other reported error
        """
        domain_name = self._validated(domain_name)

        given = {
            role: contact
            for role, contact in (
                (ContactRole.REGISTRANT, registrant_contact),
                (ContactRole.ADMIN, admin_contact),
                (ContactRole.TECHNICAL, technical_contact),
                (ContactRole.BILLING, billing_contact),
            )
            if contact is not None
        }

        if not given:
            raise ValueError("At least one contact must be provided")

        if len(given) == len(ContactRole):
            logger.info(f"Replacing all contacts for: {domain_name}")

            payload: Dict[str, Any] = {"Domain": domain_name}
            for role, contact in given.items():
                payload.update(contact.construct_creation_request(role.enom_prefix))

            self._submit("Contacts", domain_name, payload)
        else:
            for role, contact in given.items():
                logger.info(f"Replacing {role.value} for: {domain_name}")

                self._submit("Contacts", domain_name, {
                    "Domain": domain_name,
                    "ContactType": role.update_marker,
                    **contact.construct_creation_request(role.enom_prefix),
                })

        return self.get_contacts_by_domain_name(domain_name)

