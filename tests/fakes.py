"""
Fake transport and canned eNom envelopes shared by the service tests
"""

from enom_client.api import BaseTransport


RESELLER_PARTY_ID = "9D7E4A1C-RESELLER"

CONTACT_FIELDS = {
    "LastName": "Doe",
    "OrganizationName": "",
    "JobTitle": "",
    "Address1": "123 Main St",
    "Address2": "",
    "City": "Austin",
    "StateProvince": "TX",
    "PostalCode": "78701",
    "Country": "US",
    "Phone": "+1.5551234567",
    "Fax": "",
}


def ok(**fields):
    """A successful envelope"""
    return {"error_count": 0, "errors": [], "RRPText": "", **fields}


def failed(*errors, rrp_text=""):
    """A failed envelope"""
    return {"error_count": max(len(errors), 1), "errors": list(errors), "RRPText": rrp_text}


def contact_record(first_name, party_id, **overrides):
    """A normalized (unprefixed) contact record"""
    return {
        "PartyID": party_id,
        "FirstName": first_name,
        "EmailAddress": f"{first_name.lower()}@example.com",
        **CONTACT_FIELDS,
        **overrides,
    }


def prefixed(prefix, record):
    return {f"{prefix}{field}": value for field, value in record.items()}


def reseller_record(first_name="Reseller"):
    return contact_record(first_name, RESELLER_PARTY_ID)


def contacts_envelope(registrant=None, admin=None, tech=None, aux_billing=None):
    """
    GetContacts envelope. Roles left as None are filled with the reseller's
    own details, the way eNom does it.
    """
    return ok(GetContacts={
        "Registrant": prefixed("Registrant", registrant or contact_record("Ada", "P-REGISTRANT")),
        "Admin": prefixed("Admin", admin or reseller_record()),
        "Tech": prefixed("Tech", tech or reseller_record()),
        "AuxBilling": prefixed("AuxBilling", aux_billing or reseller_record()),
        "Billing": {"BillingPartyID": RESELLER_PARTY_ID, "BillingFirstName": "Reseller"},
    })


def domain_responses(name="example.com", locked="1", auto_renew="0"):
    """Envelopes for every command get_domain_by_name issues"""
    return {
        "GetDomainInfo": ok(GetDomainInfo={
            "domainname": {"sld": name.split(".")[0], "tld": "com", "domainnameid": "340724808", "content": name},
            "status": {
                "expiration": "1/13/2027 7:18:33 PM",
                "registrar": "eNom, Inc.",
                "registrationstatus": "Registered",
            },
        }),
        "GetRegLock": ok(**{"reg-lock": locked}),
        "GetRenew": ok(**{"auto-renew": auto_renew}),
        "GetDNS": ok(dns=["dns1.name-services.com", "dns2.name-services.com"]),
        "GetWhoisContact": ok(GetWhoisContacts={"rrp-info": {"created-date": "2016-01-13 19:18:33.000"}}),
        "GetContacts": contacts_envelope(),
    }


class FakeTransport(BaseTransport):
    """
    Answers commands from a table and records every call.

    A table value may be an envelope, a list of envelopes (consumed in order,
    the last one repeats) or a callable taking the params.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def submit(self, command, params):
        self.calls.append((command, dict(params)))

        reply = self.responses[command]
        if callable(reply):
            return reply(params)
        if isinstance(reply, list):
            return reply.pop(0) if len(reply) > 1 else reply[0]
        return reply

    def get_environment(self):
        return "TEST"

    def is_production(self):
        return False

    @property
    def commands(self):
        return [command for command, _ in self.calls]

    def params_for(self, command):
        return [params for name, params in self.calls if name == command]
