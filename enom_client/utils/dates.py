"""
Parsing of the registrar's textual timestamps
"""

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as _dateutil_parser


def parse_registrar_datetime(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a timestamp as eNom returns it and normalize it to UTC.

    eNom is not consistent about its date format: whois data uses
    ``2016-01-13 19:18:33.000`` while domain info uses ``1/13/2017 7:18:33 PM``.
    Values without an offset are taken to already be UTC.

    Returns None for empty input.

    Raises:
        ValueError: If the text is not a recognisable date
    """
    if not text or not text.strip():
        return None

    try:
        dt = _dateutil_parser.parse(text.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Unrecognised date from registrar: {text!r}") from e

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
