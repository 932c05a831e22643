"""
Tests for reading and updating domain contacts.
The eNom transport is faked, no credentials or network needed.

Run:
    python -m pytest tests/test_contact_service.py -v
"""

import pytest

from enom_client.api import DomainNotFoundError, InvalidDomainError, UnknownAPIError
from enom_client.api.responses import ContactsBlock
from enom_client.models import Contact, ContactRole
from enom_client.services import ContactService, normalize_contacts
from enom_client.services.contact_service import strip_role_prefix
from tests.fakes import (
    RESELLER_PARTY_ID,
    FakeTransport,
    contact_record,
    contacts_envelope,
    failed,
    ok,
    prefixed
)


DOMAIN = "example.com"


def _service(responses):
    transport = FakeTransport(responses)
    return ContactService(transport), transport


# ===========================================================================
# 1. strip_role_prefix / normalize_contacts
# ===========================================================================

class TestNormalizeContacts:

    def test_strip_role_prefix(self):
        raw = {"RegistrantFirstName": "Ada", "RegistrantEmailAddress": "ada@example.com"}
        assert strip_role_prefix(raw, "Registrant") == {
            "FirstName": "Ada",
            "EmailAddress": "ada@example.com",
        }

    def test_strip_role_prefix_ignores_other_roles_and_blanks_missing_values(self):
        raw = {"AdminFirstName": "Bob", "TechFirstName": "Eve", "AdminFax": None, "AdminPhone": {}}
        assert strip_role_prefix(raw, "Admin") == {"FirstName": "Bob", "Fax": "", "Phone": ""}

    def test_reseller_placeholders_become_registrant_copies(self):
        block = ContactsBlock.model_validate(contacts_envelope()["GetContacts"])

        contacts = normalize_contacts(block, RESELLER_PARTY_ID)

        assert set(contacts) == set(ContactRole)
        registrant = contacts[ContactRole.REGISTRANT]
        for role in ContactRole:
            assert contacts[role] == registrant
            assert contacts[role].first_name == "Ada"

    def test_filled_roles_do_not_share_state(self):
        registrant = prefixed("Registrant", contact_record("Ada", "P-REGISTRANT", PhoneExt="42"))
        block = ContactsBlock.model_validate({"Registrant": registrant})

        contacts = normalize_contacts(block, RESELLER_PARTY_ID)

        admin = contacts[ContactRole.ADMIN]
        assert admin == contacts[ContactRole.REGISTRANT]
        assert admin.extra_fields == {"PhoneExt": "42"}
        assert admin.extra_fields is not contacts[ContactRole.REGISTRANT].extra_fields
        assert admin.extra_fields is not contacts[ContactRole.TECHNICAL].extra_fields

    def test_placeholder_check_uses_given_party_id(self):
        """Without a self party id nothing is treated as a placeholder."""
        block = ContactsBlock.model_validate(contacts_envelope()["GetContacts"])

        contacts = normalize_contacts(block, None)

        assert contacts[ContactRole.ADMIN].first_name == "Reseller"

    def test_missing_registrant_is_fatal(self):
        block = ContactsBlock.model_validate({
            "Registrant": prefixed("Registrant", contact_record("Reseller", RESELLER_PARTY_ID)),
            "Admin": prefixed("Admin", contact_record("Bob", "P-ADMIN")),
        })

        with pytest.raises(DomainNotFoundError):
            normalize_contacts(block, RESELLER_PARTY_ID)


# ===========================================================================
# 2. get_contacts_by_domain_name
# ===========================================================================

class TestGetContacts:

    def test_registrant_only_fills_every_role(self):
        service, transport = _service({"GetContacts": contacts_envelope()})

        contacts = service.get_contacts_by_domain_name(DOMAIN)

        assert len(contacts) == 4
        for role in ContactRole:
            assert contacts[role].email == "ada@example.com"
            assert contacts[role].party_id == "P-REGISTRANT"
        assert transport.calls == [("GetContacts", {"Domain": DOMAIN})]

    def test_distinct_contacts_are_kept(self):
        service, _ = _service({"GetContacts": contacts_envelope(
            admin=contact_record("Bob", "P-ADMIN"),
            tech=contact_record("Carol", "P-TECH"),
            aux_billing=contact_record("Dan", "P-BILLING", City="Denver"),
        )})

        contacts = service.get_contacts_by_domain_name(DOMAIN)

        assert contacts[ContactRole.REGISTRANT].first_name == "Ada"
        assert contacts[ContactRole.ADMIN].first_name == "Bob"
        assert contacts[ContactRole.TECHNICAL].first_name == "Carol"
        assert contacts[ContactRole.BILLING].first_name == "Dan"
        assert contacts[ContactRole.BILLING].city == "Denver"
        assert len({contact.party_id for contact in contacts.values()}) == 4

    def test_contact_fields_match_response(self):
        record = contact_record("Ada", "P-REGISTRANT", OrganizationName="Analytical Engines")
        service, _ = _service({"GetContacts": contacts_envelope(registrant=record)})

        registrant = service.get_contacts_by_domain_name(DOMAIN)[ContactRole.REGISTRANT]

        assert registrant.to_response_record() == {**record, **{
            field: "" for field in Contact.field_names() if field not in record
        }}

    def test_domain_not_found(self):
        service, _ = _service({"GetContacts": failed("Domain name not found")})

        with pytest.raises(DomainNotFoundError, match="not found in your account"):
            service.get_contacts_by_domain_name("missing.com")

    def test_other_errors_are_unknown(self):
        service, _ = _service({"GetContacts": failed("Invalid SLD")})

        with pytest.raises(UnknownAPIError):
            service.get_contacts_by_domain_name(DOMAIN)

    def test_missing_contact_block(self):
        service, _ = _service({"GetContacts": ok()})

        with pytest.raises(DomainNotFoundError):
            service.get_contacts_by_domain_name(DOMAIN)

    def test_invalid_domain_is_rejected_before_calling(self):
        service, transport = _service({})

        with pytest.raises(InvalidDomainError):
            service.get_contacts_by_domain_name("not a domain")
        assert transport.calls == []


# ===========================================================================
# 3. update_contacts_for_domain_name
# ===========================================================================

def _new_contact(first_name):
    return Contact.construct_from_response(contact_record(first_name, ""))


class TestUpdateContacts:

    def test_all_four_contacts_use_one_request(self):
        service, transport = _service({
            "Contacts": ok(),
            "GetContacts": contacts_envelope(),
        })

        service.update_contacts_for_domain_name(
            DOMAIN,
            registrant_contact=_new_contact("Ada"),
            admin_contact=_new_contact("Bob"),
            technical_contact=_new_contact("Carol"),
            billing_contact=_new_contact("Dan"),
        )

        assert transport.commands == ["Contacts", "GetContacts"]
        payload = transport.params_for("Contacts")[0]
        assert payload["Domain"] == DOMAIN
        assert "ContactType" not in payload
        assert payload["RegistrantFirstName"] == "Ada"
        assert payload["AdminFirstName"] == "Bob"
        assert payload["TechFirstName"] == "Carol"
        assert payload["AuxBillingFirstName"] == "Dan"

    def test_subset_uses_one_request_per_contact(self):
        service, transport = _service({
            "Contacts": ok(),
            "GetContacts": contacts_envelope(),
        })

        service.update_contacts_for_domain_name(
            DOMAIN,
            admin_contact=_new_contact("Bob"),
            billing_contact=_new_contact("Dan"),
        )

        assert transport.commands == ["Contacts", "Contacts", "GetContacts"]
        admin_payload, billing_payload = transport.params_for("Contacts")
        assert admin_payload["ContactType"] == "ADMIN"
        assert admin_payload["AdminFirstName"] == "Bob"
        assert not any(key.startswith("AuxBilling") for key in admin_payload)
        assert billing_payload["ContactType"] == "AUXBILLING"
        assert billing_payload["AuxBillingFirstName"] == "Dan"

    def test_single_registrant_update(self):
        service, transport = _service({
            "Contacts": ok(),
            "GetContacts": contacts_envelope(),
        })

        service.update_contacts_for_domain_name(DOMAIN, registrant_contact=_new_contact("Ada"))

        payload = transport.params_for("Contacts")[0]
        assert payload["ContactType"] == "REGISTRANT"
        assert "RegistrantPartyID" not in payload

    def test_returns_refetched_contacts(self):
        service, _ = _service({
            "Contacts": ok(),
            "GetContacts": contacts_envelope(admin=contact_record("Bob", "P-ADMIN")),
        })

        contacts = service.update_contacts_for_domain_name(DOMAIN, admin_contact=_new_contact("Bob"))

        assert contacts[ContactRole.ADMIN].party_id == "P-ADMIN"
        assert contacts[ContactRole.TECHNICAL].first_name == "Ada"

    def test_failure_aborts_remaining_requests(self):
        service, transport = _service({
            "Contacts": failed("Invalid Phone"),
            "GetContacts": contacts_envelope(),
        })

        with pytest.raises(UnknownAPIError):
            service.update_contacts_for_domain_name(
                DOMAIN,
                admin_contact=_new_contact("Bob"),
                technical_contact=_new_contact("Carol"),
            )

        assert transport.commands == ["Contacts"]

    def test_domain_id_not_found(self):
        service, _ = _service({"Contacts": failed("Domain name ID not found")})

        with pytest.raises(DomainNotFoundError):
            service.update_contacts_for_domain_name(DOMAIN, admin_contact=_new_contact("Bob"))

    def test_requires_a_contact(self):
        service, transport = _service({})

        with pytest.raises(ValueError):
            service.update_contacts_for_domain_name(DOMAIN)
        assert transport.calls == []
