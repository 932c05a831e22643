"""
Base Service
Plumbing shared by the contact and domain services
"""

from typing import Any, Dict, Optional

from enom_client.api import BaseTransport, EnomClient
from enom_client.api.error_rules import raise_for_errors
from enom_client.api.exceptions import InvalidDomainError
from enom_client.api.responses import EnomResponse, parse_response
from enom_client.utils.validators import validate_domain, ValidationError


class BaseService:
    """
    Holds the transport and runs one eNom command at a time: submit,
    validate the reply against its schema, raise for reported errors.
    """

    def __init__(self, client: Optional[BaseTransport] = None):
        """
        Args:
            client: Optional transport. If None, an EnomClient is created from config.
        """
        self.client = client or EnomClient()

    def _submit(self, command: str, domain_name: str, params: Dict[str, Any]) -> EnomResponse:
        response = parse_response(command, self.client.submit(command, params))
        raise_for_errors(command, domain_name, response)
        return response

    @staticmethod
    def _validated(domain_name: str) -> str:
        try:
            return validate_domain(domain_name)
        except ValidationError as e:
            raise InvalidDomainError(f"Invalid domain format: {str(e)}") from e
