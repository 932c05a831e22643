"""
Custom exceptions for eNom API operations
"""


class APIError(Exception):
    """Base exception for all API errors"""

    def __init__(self, message: str, status_code: int = None, response_data: dict = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        super().__init__(self.message)

    def __str__(self):
        if self.status_code:
            return f"APIError (HTTP {self.status_code}): {self.message}"
        return f"APIError: {self.message}"

    @property
    def errors(self) -> list:
        """Error strings reported by eNom for the failed command"""
        return list(self.response_data.get("errors", []))


# Errors reported by eNom in the response envelope

class DomainNotFoundError(APIError):
    """Raised when a domain is not found in the reseller's account"""
    pass


class DomainNotOwnedError(APIError):
    """Raised when a domain is registered, but to someone else"""
    pass


class DomainNotRegisteredError(APIError):
    """Raised when a domain has no registration at all"""
    pass


class UnknownAPIError(APIError):
    """Raised when eNom reports an error no rule recognises"""
    pass


# Transport level errors

class AuthenticationError(APIError):
    """Raised when API authentication fails"""
    pass


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded"""
    pass


class InvalidDomainError(APIError):
    """Raised when domain format is invalid"""
    pass


class NetworkError(APIError):
    """Raised when network/connection errors occur"""
    pass


class ServerError(APIError):
    """Raised when eNom returns 5xx errors"""
    pass


class ResponseParseError(APIError):
    """Raised when the response body is not the XML document eNom should send"""
    pass
