"""
Shared utilities: configuration, logging, validation, date parsing
"""

from enom_client.utils.config import Settings, get_settings, reset_settings
from enom_client.utils.dates import parse_registrar_datetime
from enom_client.utils.logger import configure_logging, get_logger
from enom_client.utils.validators import ValidationError, validate_domain

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "parse_registrar_datetime",
    "configure_logging",
    "get_logger",
    "ValidationError",
    "validate_domain",
]
