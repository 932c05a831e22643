"""
Domain Service
Assembles Domain snapshots from eNom and changes lock / auto renew state
"""

from datetime import datetime
from typing import List, Optional

from enom_client.api import BaseTransport
from enom_client.api.exceptions import DomainNotFoundError, UnknownAPIError
from enom_client.api.responses import (
    GetDNSResponse,
    GetDomainInfoResponse,
    GetRegLockResponse,
    GetRenewResponse,
    GetWhoisContactResponse
)
from enom_client.models import Domain
from enom_client.services.base_service import BaseService
from enom_client.services.contact_service import ContactService
from enom_client.utils.dates import parse_registrar_datetime
from enom_client.utils.logger import get_logger

logger = get_logger(__name__)


class DomainService(BaseService):
    """
    Domain operations for the reseller account.

    Every eNom call is a blocking round trip and calls are made one after
    another. A Domain therefore reflects several moments in time; if the
    domain changes while it is being assembled the snapshot can mix old and
    new state.
    """

    def __init__(
        self,
        client: Optional[BaseTransport] = None,
        contact_service: Optional[ContactService] = None
    ):
        """
        Initialize domain service.

        Args:
            client: Optional transport. If None, an EnomClient is created from config.
            contact_service: Optional ContactService. If None, one sharing the
                             same transport is created.

        Example:
            service = DomainService()
            domain = service.get_domain_by_name("example.com")
            print(domain.is_locked, domain.name_servers)
        """
        super().__init__(client)
        self.contact_service = contact_service or ContactService(self.client)

        logger.info("Domain service initialized")
        logger.info(f"Transport: {self.client.get_transport_name()}")
        logger.info(f"Environment: {self.client.get_environment()}")

    def get_domain_by_name(self, domain_name: str) -> Domain:
        """
        Get a fully populated Domain.

        GetDomainInfo alone does not carry enough to build a Domain, so this
        also looks up lock state, auto renew state, name servers, creation
        date and contacts, in that order. The first failing lookup fails the
        whole call.

        Args:
            domain_name: FQDN

        Returns:
            Domain snapshot

        Raises:
            DomainNotFoundError: If the domain is not in your account
            DomainNotOwnedError, DomainNotRegisteredError, UnknownAPIError:
                Propagated from the individual lookups
        """
        domain_name = self._validated(domain_name)
        logger.info(f"Getting domain: {domain_name}")

        response: GetDomainInfoResponse = self._submit(
            "GetDomainInfo", domain_name, {"Domain": domain_name}
        )

        if response.domain_info is None:
            logger.error(f"GetDomainInfo {domain_name}: response did not contain domain info")
            raise DomainNotFoundError("Response did not contain domain info")

        domain = Domain.construct_from_response(
            domain_name=domain_name,
            domain_info=response.domain_info,
            is_locked=self.get_is_domain_locked_by_name(domain_name),
            is_auto_renew=self.get_is_domain_auto_renew_by_name(domain_name),
            name_servers=self.get_domain_name_servers_by_name(domain_name),
            created_date=self.get_domain_created_date_by_name(domain_name),
            contacts=self.contact_service.get_contacts_by_domain_name(domain_name),
        )

        logger.info(f"Retrieved {domain.name} - locked: {domain.is_locked}, auto renew: {domain.is_auto_renew}")

        return domain

    # ==================== Registrar lock ====================

    def get_is_domain_locked_by_name(self, domain_name: str) -> bool:
        """
        Check whether the registrar lock is enabled.

        Raises:
            DomainNotOwnedError: If someone else owns the domain
            DomainNotRegisteredError: If the domain is not registered
            UnknownAPIError: For any other reported error, or no lock data
        """
        domain_name = self._validated(domain_name)

        response: GetRegLockResponse = self._submit(
            "GetRegLock", domain_name, {"Domain": domain_name}
        )

        if response.reg_lock is None:
            raise UnknownAPIError("Response did not contain lock data")

        return response.reg_lock

    def enable_domain_lock_by_name(self, domain_name: str) -> Domain:
        """Lock the domain. A domain that is already locked is left as is."""
        return self._set_domain_locking(domain_name, is_locked=True)

    def disable_domain_lock_by_name(self, domain_name: str) -> Domain:
        """Unlock the domain. A domain that is already unlocked is left as is."""
        return self._set_domain_locking(domain_name, is_locked=False)

    def _set_domain_locking(self, domain_name: str, is_locked: bool) -> Domain:
        domain_name = self._validated(domain_name)
        logger.info(f"{'Locking' if is_locked else 'Unlocking'} domain: {domain_name}")

        # eNom's "already locked/unlocked" error is swallowed by the SetRegLock rules
        self._submit("SetRegLock", domain_name, {
            "Domain": domain_name,
            "UnlockRegistrar": "0" if is_locked else "1",
        })

        return self.get_domain_by_name(domain_name)

    # ==================== Auto renew ====================

    def get_is_domain_auto_renew_by_name(self, domain_name: str) -> bool:
        """
        Check whether eNom will renew the domain automatically.

        Raises:
            DomainNotFoundError: If the domain is not in your account
            UnknownAPIError: For any other reported error, or no renewal data
        """
        domain_name = self._validated(domain_name)

        response: GetRenewResponse = self._submit(
            "GetRenew", domain_name, {"Domain": domain_name}
        )

        if response.auto_renew is None:
            raise UnknownAPIError("Response did not contain renewal data")

        return response.auto_renew

    def enable_domain_auto_renew_by_name(self, domain_name: str) -> Domain:
        """Turn on auto renew and return the updated Domain."""
        return self._set_domain_auto_renew(domain_name, is_auto_renew=True)

    def disable_domain_auto_renew_by_name(self, domain_name: str) -> Domain:
        """Turn off auto renew and return the updated Domain."""
        return self._set_domain_auto_renew(domain_name, is_auto_renew=False)

    def _set_domain_auto_renew(self, domain_name: str, is_auto_renew: bool) -> Domain:
        domain_name = self._validated(domain_name)
        logger.info(f"{'Enabling' if is_auto_renew else 'Disabling'} auto renew for: {domain_name}")

        self._submit("SetRenew", domain_name, {
            "Domain": domain_name,
            "RenewFlag": "1" if is_auto_renew else "0",
        })

        return self.get_domain_by_name(domain_name)

    # ==================== Name servers & dates ====================

    def get_domain_name_servers_by_name(self, domain_name: str) -> List[str]:
        """
        Get the authoritative name servers of a domain.

        Raises:
            DomainNotFoundError: If the domain is not in your account
            UnknownAPIError: For any other reported error, or no name server data
        """
        domain_name = self._validated(domain_name)

        response: GetDNSResponse = self._submit(
            "GetDNS", domain_name, {"Domain": domain_name}
        )

        if response.dns is None:
            raise UnknownAPIError("Response did not contain nameserver data")

        return list(response.dns)

    def get_domain_created_date_by_name(self, domain_name: str) -> datetime:
        """
        Get when the domain registration was created, in UTC.

        Raises:
            DomainNotFoundError: If eNom has no whois record for the domain
            UnknownAPIError: For any other reported error, or no creation date
        """
        domain_name = self._validated(domain_name)

        response: GetWhoisContactResponse = self._submit(
            "GetWhoisContact", domain_name, {"Domain": domain_name}
        )

        if response.created_date is None:
            raise UnknownAPIError("Response did not contain creation data")

        try:
            return parse_registrar_datetime(response.created_date)
        except ValueError as e:
            raise UnknownAPIError(str(e)) from e
