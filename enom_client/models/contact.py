"""
Contact value object and the four contact roles eNom knows about
"""

from enum import Enum
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class ContactRole(str, Enum):
    """A contact role, valued by the key used in contact mappings"""

    REGISTRANT = "registrant_contact"
    ADMIN = "admin_contact"
    TECHNICAL = "technical_contact"
    BILLING = "billing_contact"

    @property
    def enom_prefix(self) -> str:
        """Prefix eNom puts in front of every field of this role"""
        return ENOM_CONTACT_PREFIXES[self]

    @property
    def update_marker(self) -> str:
        """ContactType value for a single role Contacts update"""
        return self.enom_prefix.upper()


ENOM_CONTACT_PREFIXES: Dict[ContactRole, str] = {
    ContactRole.REGISTRANT: "Registrant",
    ContactRole.ADMIN: "Admin",
    ContactRole.TECHNICAL: "Tech",
    ContactRole.BILLING: "AuxBilling",
}


class Contact(BaseModel):
    """
    A domain contact.

    Field aliases are eNom's field names with the role prefix removed
    (``EmailAddress`` for ``RegistrantEmailAddress``). Values are kept
    verbatim; phone numbers stay in eNom's ``+1.5555555555`` form.
    Fields eNom sends that have no attribute here are kept in
    ``extra_fields`` so nothing from the response is dropped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(default="", alias="FirstName")
    last_name: str = Field(default="", alias="LastName")
    organization_name: str = Field(default="", alias="OrganizationName")
    job_title: str = Field(default="", alias="JobTitle")
    address1: str = Field(default="", alias="Address1")
    address2: str = Field(default="", alias="Address2")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="StateProvince")
    zipcode: str = Field(default="", alias="PostalCode")
    country: str = Field(default="", alias="Country")
    email: str = Field(default="", alias="EmailAddress")
    phone_number: str = Field(default="", alias="Phone")
    fax_number: str = Field(default="", alias="Fax")
    party_id: str = Field(default="", alias="PartyID")

    extra_fields: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def field_names(cls) -> Dict[str, str]:
        """Map of eNom field name -> attribute name"""
        return {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias
        }

    @classmethod
    def construct_from_response(cls, record: Mapping[str, Any]) -> "Contact":
        """
        Build a Contact from a normalized (prefix stripped) eNom record.

        Args:
            record: eNom field name -> value, e.g. {"FirstName": "Ada", ...}
        """
        known = cls.field_names()

        values: Dict[str, Any] = {}
        extra: Dict[str, str] = {}
        for field_name, value in record.items():
            if field_name in known:
                values[known[field_name]] = value
            else:
                extra[field_name] = value

        return cls(**values, extra_fields=extra)

    def to_response_record(self) -> Dict[str, str]:
        """The normalized eNom record this contact was built from"""
        record = {
            alias: getattr(self, name)
            for alias, name in self.field_names().items()
        }
        record.update(self.extra_fields)
        return record

    def construct_creation_request(self, prefix: str) -> Dict[str, str]:
        """
        Fields for a Contacts request, each prefixed for one role.

        The party id is assigned by eNom and never sent back.

        Args:
            prefix: eNom role prefix, e.g. 'Registrant' or 'AuxBilling'
        """
        return {
            f"{prefix}{alias}": getattr(self, name)
            for alias, name in self.field_names().items()
            if alias != "PartyID"
        }
