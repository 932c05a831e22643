"""
eNom Reseller API Client
Executes eNom commands over HTTP and turns the XML reply into a response envelope
"""

import re
import xml.etree.ElementTree as ET
import requests
from typing import Dict, Any, List, Optional
from tenacity import (
    Retrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from enom_client.api.base_transport import BaseTransport
from enom_client.utils.config import get_settings, Settings
from enom_client.utils.logger import configure_logging, get_logger
from enom_client.utils.validators import DomainValidator
from enom_client.api.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    NetworkError,
    ServerError,
    ResponseParseError
)


logger = get_logger(__name__)

_ERR_INDEX = re.compile(r"(\d+)$")


class EnomClient(BaseTransport):
    """
    eNom API client.
    Supports both the TEST (resellertest) and LIVE environments.

    Documentation: https://www.enom.com/api/
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize eNom API client.

        Args:
            config: Optional Settings object. If None, loads from get_settings()
        """
        self.config = config or get_settings()
        self.base_url = self.config.enom_base_url
        self.timeout = self.config.enom_timeout
        self.max_attempts = self.config.enom_max_attempts

        configure_logging(self.config.log_level, self.config.enom_log_file)

        logger.info(f"eNom Client initialized - Environment: {self.config.enom_env}")
        logger.info(f"Base URL: {self.base_url}")

    def get_environment(self) -> str:
        """Get current environment (TEST or LIVE)"""
        return self.config.enom_env

    def is_production(self) -> bool:
        """Check if client is configured for the LIVE environment"""
        return self.config.is_production()

    def submit(self, command: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute an eNom command, retrying transport failures only.

        Errors eNom reports inside a successful reply are returned in the
        envelope and never retried.

        Args:
            command: eNom command name (e.g. 'GetRegLock')
            params: Command parameters

        Returns:
            Response envelope with 'error_count', 'errors' and the command's fields
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            retry=retry_if_exception_type((NetworkError, ServerError, RateLimitError)),
            reraise=True
        )

        return retrying(self._make_request, command, params)

    def _build_query(self, command: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Build the query string for a command.

        eNom addresses a domain by SLD and TLD, so a 'Domain' param is split.
        """
        query = dict(params)

        domain = query.pop("Domain", None)
        if domain:
            query["SLD"] = DomainValidator.extract_sld(domain)
            query["TLD"] = DomainValidator.extract_tld(domain)

        return {
            "command": command,
            "responsetype": "XML",
            **self.config.enom_auth_params,
            **query
        }

    def _make_request(self, command: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make an HTTP request to eNom with error handling.

        Args:
            command: eNom command name
            params: Command parameters

        Returns:
            Response envelope

        Raises:
            Various APIError subclasses for transport failures
        """
        query = self._build_query(command, params)

        logger.debug(f"GET {self.base_url} command={command}")
        logger.debug(f"Params: {params}")

        try:
            response = requests.request(
                method="GET",
                url=self.base_url,
                params=query,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            raise NetworkError(f"Request timed out after {self.timeout} seconds")

        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {str(e)}")

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {str(e)}")

        if response.status_code == 200:
            return self._parse_response(command, response.text)

        elif response.status_code in (401, 403):
            raise AuthenticationError(
                "Authentication failed. Check your eNom login and API token.",
                status_code=response.status_code
            )

        elif response.status_code == 429:
            raise RateLimitError(
                "eNom rate limit exceeded. Please wait before retrying.",
                status_code=429
            )

        elif 500 <= response.status_code < 600:
            raise ServerError(
                f"eNom server error: {response.text or 'Internal server error'}",
                status_code=response.status_code
            )

        raise APIError(
            f"Unexpected error: {response.text or 'Unknown error'}",
            status_code=response.status_code
        )

    def _parse_response(self, command: str, body: str) -> Dict[str, Any]:
        """
        Parse eNom's XML reply into a response envelope.

        Args:
            command: Command the reply belongs to (for error messages)
            body: Raw XML text

        Returns:
            Response envelope dictionary
        """
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            raise ResponseParseError(
                f"{command} returned a body that is not XML: {str(e)}",
                response_data={"body": body}
            ) from e

        document = _element_to_value(root)
        if not isinstance(document, dict):
            raise ResponseParseError(
                f"{command} returned an empty interface-response",
                response_data={"body": body}
            )

        envelope = dict(document)
        envelope["errors"] = _collect_errors(document.get("errors"))
        envelope["error_count"] = _to_int(document.get("ErrCount"), default=len(envelope["errors"]))
        envelope.setdefault("RRPText", "")

        if envelope["error_count"] > 0:
            logger.debug(f"{command} reported {envelope['error_count']} error(s): {envelope['errors']}")

        return envelope


def _element_to_value(element: ET.Element) -> Any:
    """
    Convert an XML element into plain Python values.

    Leaves become stripped strings (empty elements become ""), repeated child
    tags become lists and attributes are kept with the element text under
    'content'.
    """
    children = list(element)
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text

    result: Dict[str, Any] = dict(element.attrib)
    for child in children:
        value = _element_to_value(child)
        if child.tag in result:
            if not isinstance(result[child.tag], list):
                result[child.tag] = [result[child.tag]]
            result[child.tag].append(value)
        else:
            result[child.tag] = value

    if text:
        result["content"] = text

    return result


def _collect_errors(raw_errors: Any) -> List[str]:
    """Flatten <errors><Err1/>..<ErrN/></errors> into an ordered list"""
    if not raw_errors:
        return []

    if isinstance(raw_errors, str):
        return [raw_errors]

    if isinstance(raw_errors, list):
        return [str(error) for error in raw_errors if error]

    def err_index(key: str) -> int:
        match = _ERR_INDEX.search(key)
        return int(match.group(1)) if match else 0

    return [
        str(raw_errors[key])
        for key in sorted(raw_errors, key=err_index)
        if raw_errors[key]
    ]


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
