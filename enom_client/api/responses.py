"""
Response schemas for eNom commands

Each command's envelope is validated into one of these models at the
transport boundary, so services read typed attributes instead of probing
dictionary keys.
"""

from typing import Annotated, Any, Dict, List, Optional, Type

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator
)

from enom_client.api.exceptions import ResponseParseError


class EnomResponse(BaseModel):
    """Fields every eNom reply carries"""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    error_count: int = 0
    errors: List[str] = Field(default_factory=list)
    rrp_text: str = Field(default="", alias="RRPText")

    @field_validator("rrp_text", mode="before")
    @classmethod
    def _blank_rrp_text(cls, v: Any) -> Any:
        return v if isinstance(v, str) else ""

    @property
    def is_success(self) -> bool:
        return self.error_count == 0


class ContactsBlock(BaseModel):
    """The <GetContacts> block: one flat, prefixed record per role"""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    registrant: Dict[str, Any] = Field(default_factory=dict, alias="Registrant")
    admin: Dict[str, Any] = Field(default_factory=dict, alias="Admin")
    tech: Dict[str, Any] = Field(default_factory=dict, alias="Tech")
    aux_billing: Dict[str, Any] = Field(default_factory=dict, alias="AuxBilling")
    billing: Dict[str, Any] = Field(default_factory=dict, alias="Billing")

    @field_validator("registrant", "admin", "tech", "aux_billing", "billing", mode="before")
    @classmethod
    def _empty_block(cls, v: Any) -> Any:
        # An empty element parses as "" rather than a mapping
        return v if isinstance(v, dict) else {}

    @property
    def billing_party_id(self) -> Optional[str]:
        """Party id of the reseller's own billing contact"""
        return self.billing.get("BillingPartyID") or None

    def role_record(self, prefix: str) -> Dict[str, Any]:
        return {
            "Registrant": self.registrant,
            "Admin": self.admin,
            "Tech": self.tech,
            "AuxBilling": self.aux_billing,
        }[prefix]


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


# A block that came back as an empty element is treated as missing
Block = Annotated[Optional[Dict[str, Any]], BeforeValidator(_blank_to_none)]


class GetContactsResponse(EnomResponse):
    contacts: Annotated[Optional[ContactsBlock], BeforeValidator(_blank_to_none)] = Field(
        default=None, alias="GetContacts"
    )


class GetDomainInfoResponse(EnomResponse):
    domain_info: Block = Field(default=None, alias="GetDomainInfo")


# eNom flags are "1"/"0"; an empty element means the flag was not sent
Flag = Annotated[Optional[bool], BeforeValidator(_blank_to_none)]


class GetRegLockResponse(EnomResponse):
    reg_lock: Flag = Field(default=None, alias="reg-lock")


class GetRenewResponse(EnomResponse):
    auto_renew: Flag = Field(default=None, alias="auto-renew")


class GetDNSResponse(EnomResponse):
    dns: Optional[List[str]] = None

    @field_validator("dns", mode="before")
    @classmethod
    def _single_nameserver(cls, v: Any) -> Any:
        # A single <dns> element is not repeated, so it arrives as a string
        if isinstance(v, str):
            return [v] if v else []
        return v


class GetWhoisContactResponse(EnomResponse):
    whois: Block = Field(default=None, alias="GetWhoisContacts")

    @property
    def created_date(self) -> Optional[str]:
        if not self.whois:
            return None
        rrp_info = self.whois.get("rrp-info")
        if not isinstance(rrp_info, dict):
            return None
        return rrp_info.get("created-date") or None


RESPONSE_SCHEMAS: Dict[str, Type[EnomResponse]] = {
    "GetContacts": GetContactsResponse,
    "Contacts": EnomResponse,
    "GetDomainInfo": GetDomainInfoResponse,
    "GetRegLock": GetRegLockResponse,
    "SetRegLock": EnomResponse,
    "GetRenew": GetRenewResponse,
    "SetRenew": EnomResponse,
    "GetDNS": GetDNSResponse,
    "GetWhoisContact": GetWhoisContactResponse,
}


def parse_response(command: str, envelope: Dict[str, Any]) -> EnomResponse:
    """
    Validate a transport envelope against the schema for its command.

    Raises:
        ResponseParseError: If a field has a value of the wrong shape
    """
    schema = RESPONSE_SCHEMAS.get(command, EnomResponse)
    try:
        return schema.model_validate(envelope)
    except ValidationError as e:
        raise ResponseParseError(
            f"{command} response did not match its schema: {e}",
            response_data=envelope
        ) from e
