"""
Domain value object
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from enom_client.models.contact import Contact, ContactRole
from enom_client.utils.dates import parse_registrar_datetime


class Domain(BaseModel):
    """
    Snapshot of a domain in the reseller account.

    Built fresh from several eNom calls and never modified afterwards;
    operations that change a domain return a new snapshot.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    domain_id: Optional[str] = None
    status: Optional[str] = None
    created_date: datetime
    expiration_date: Optional[datetime] = None
    is_locked: bool
    is_auto_renew: bool
    name_servers: List[str]
    registrant_contact: Contact
    admin_contact: Contact
    technical_contact: Contact
    billing_contact: Contact

    @property
    def contacts(self) -> Dict[ContactRole, Contact]:
        return {role: getattr(self, role.value) for role in ContactRole}

    @classmethod
    def construct_from_response(
        cls,
        domain_name: str,
        domain_info: Mapping[str, Any],
        is_locked: bool,
        is_auto_renew: bool,
        name_servers: List[str],
        contacts: Mapping[ContactRole, Contact],
        created_date: datetime
    ) -> "Domain":
        """
        Assemble a Domain from the GetDomainInfo block and the results of
        the other lookups.

        Args:
            domain_name: Name the domain was requested by
            domain_info: <GetDomainInfo> block
            is_locked: Registrar lock state
            is_auto_renew: Auto renew state
            name_servers: Authoritative name servers
            contacts: Mapping with all four contact roles
            created_date: Registration creation date (UTC)
        """
        domainname = domain_info.get("domainname")
        status = domain_info.get("status")
        if not isinstance(status, dict):
            status = {}

        name = domain_name
        domain_id = None
        if isinstance(domainname, dict):
            name = domainname.get("content") or domain_name
            domain_id = domainname.get("domainnameid") or None
        elif domainname:
            name = domainname

        # Expiration is informational; an unreadable value is left unset
        try:
            expiration_date = parse_registrar_datetime(status.get("expiration"))
        except ValueError:
            expiration_date = None

        return cls(
            name=name.lower(),
            domain_id=domain_id,
            status=status.get("registrationstatus") or None,
            created_date=created_date,
            expiration_date=expiration_date,
            is_locked=is_locked,
            is_auto_renew=is_auto_renew,
            name_servers=list(name_servers),
            **{role.value: contacts[role] for role in ContactRole}
        )
