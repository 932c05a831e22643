"""
Base Transport Interface
Abstract base class for anything that can execute an eNom command
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseTransport(ABC):
    """
    Abstract base class for eNom transports.
    Services only depend on this interface, never on HTTP details.
    """

    @abstractmethod
    def submit(self, command: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a named eNom command.

        Args:
            command: eNom command name (e.g. 'GetContacts')
            params: Command parameters. A 'Domain' key holds the FQDN.

        Returns:
            Response envelope:
            {
                "error_count": int,
                "errors": [str, ...],
                "RRPText": str,
                ...command specific fields
            }
        """
        pass

    @abstractmethod
    def get_environment(self) -> str:
        """
        Get current environment (TEST or LIVE).

        Returns:
            Environment name string
        """
        pass

    @abstractmethod
    def is_production(self) -> bool:
        """
        Check if running against the live registry.

        Returns:
            True if production, False if test
        """
        pass

    def get_transport_name(self) -> str:
        """
        Get transport name.
        Default implementation returns class name.

        Returns:
            Transport name string
        """
        return self.__class__.__name__.replace("Client", "")
