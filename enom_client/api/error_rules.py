"""
Error discrimination for eNom commands

eNom has no error codes. Each command reports failures differently: most put
messages in the error list, GetRegLock only explains itself through the
free-text RRPText. The rules for every command live in ERROR_RULES so the
inconsistency stays visible in one table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Type

from enom_client.api.exceptions import (
    APIError,
    DomainNotFoundError,
    DomainNotOwnedError,
    DomainNotRegisteredError,
    UnknownAPIError
)
from enom_client.api.responses import EnomResponse
from enom_client.utils.logger import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NOT_OWNED = "not_owned"
    NOT_REGISTERED = "not_registered"
    # The change asked for is already in place; the command succeeded
    ALREADY_SET = "already_set"


class MatchSource(str, Enum):
    # Pattern equals one of the reported errors
    ERROR_LIST = "error_list"
    # Pattern is contained in one of the reported errors
    ERROR_TEXT = "error_text"
    # Pattern is contained in RRPText
    RRP_TEXT = "rrp_text"


@dataclass(frozen=True)
class ErrorRule:
    pattern: str
    source: MatchSource
    kind: ErrorKind

    def matches(self, response: EnomResponse) -> bool:
        if self.source is MatchSource.ERROR_LIST:
            return self.pattern in response.errors
        if self.source is MatchSource.ERROR_TEXT:
            return any(self.pattern in error for error in response.errors)
        return self.pattern in response.rrp_text


NOT_FOUND_IN_ACCOUNT = "Domain not found in your account"

ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: NOT_FOUND_IN_ACCOUNT,
    ErrorKind.NOT_OWNED: "Domain owned by someone else",
    ErrorKind.NOT_REGISTERED: "Domain is not registered",
}

ERROR_TYPES: Dict[ErrorKind, Type[APIError]] = {
    ErrorKind.NOT_FOUND: DomainNotFoundError,
    ErrorKind.NOT_OWNED: DomainNotOwnedError,
    ErrorKind.NOT_REGISTERED: DomainNotRegisteredError,
}

_DOMAIN_NAME_NOT_FOUND = ErrorRule("Domain name not found", MatchSource.ERROR_LIST, ErrorKind.NOT_FOUND)

ERROR_RULES: Dict[str, List[ErrorRule]] = {
    "GetContacts": [_DOMAIN_NAME_NOT_FOUND],
    "Contacts": [
        ErrorRule("Domain name ID not found", MatchSource.ERROR_LIST, ErrorKind.NOT_FOUND),
    ],
    "GetDomainInfo": [_DOMAIN_NAME_NOT_FOUND],
    "GetRegLock": [
        ErrorRule("Command blocked", MatchSource.RRP_TEXT, ErrorKind.NOT_OWNED),
        ErrorRule("Object does not exist", MatchSource.RRP_TEXT, ErrorKind.NOT_REGISTERED),
    ],
    "SetRegLock": [
        _DOMAIN_NAME_NOT_FOUND,
        ErrorRule("domain is already", MatchSource.ERROR_TEXT, ErrorKind.ALREADY_SET),
    ],
    "GetRenew": [_DOMAIN_NAME_NOT_FOUND],
    "SetRenew": [_DOMAIN_NAME_NOT_FOUND],
    "GetDNS": [_DOMAIN_NAME_NOT_FOUND],
    "GetWhoisContact": [
        ErrorRule("No results found", MatchSource.ERROR_LIST, ErrorKind.NOT_FOUND),
    ],
}


def classify_error(command: str, response: EnomResponse) -> Optional[ErrorKind]:
    """
    Find the first rule for a command that matches a failed response.

    Returns None when the response succeeded or no rule recognises it.
    """
    if response.is_success:
        return None

    for rule in ERROR_RULES.get(command, []):
        if rule.matches(response):
            return rule.kind

    return None


def raise_for_errors(command: str, domain_name: str, response: EnomResponse) -> None:
    """
    Raise the exception a failed response maps to.

    Returns normally on success, and when the only problem reported is that
    the requested state is already in place.

    Raises:
        DomainNotFoundError, DomainNotOwnedError, DomainNotRegisteredError:
            When a rule for the command matches
        UnknownAPIError: For any other reported error
    """
    if response.is_success:
        return

    kind = classify_error(command, response)
    response_data = {"command": command, "errors": response.errors, "RRPText": response.rrp_text}

    if kind is ErrorKind.ALREADY_SET:
        logger.warning(f"{command} {domain_name}: already in requested state, nothing to do")
        return

    if kind is not None:
        logger.error(f"{command} {domain_name}: {ERROR_MESSAGES[kind]}")
        raise ERROR_TYPES[kind](ERROR_MESSAGES[kind], response_data=response_data)

    # GetRegLock explains itself only through RRPText
    message = response.rrp_text if command == "GetRegLock" and response.rrp_text else "Unknown error"
    logger.error(f"{command} {domain_name}: {message} {response.errors}")
    raise UnknownAPIError(message, response_data=response_data)
