"""Compact UTC timestamps used on the task wire format.

Every date on the wire is exactly ``YYYYMMDDThhmmssZ``: sixteen characters,
always UTC. Nothing else is accepted and nothing else is produced.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

import pytz

from .errors import DecodeError

TIMESTAMP_LAYOUT = "%Y%m%dT%H%M%SZ"

# strptime alone accepts short fields such as "2024111T..." so the width is checked first
_TIMESTAMP_RE = re.compile(r"[0-9]{8}T[0-9]{6}Z")


def parse_timestamp(raw: str, field: str = "timestamp") -> datetime:
    """Parse ``raw`` into an aware UTC datetime.

    Raises DecodeError naming ``field`` when the string has the wrong shape
    or describes an impossible calendar value (month 13, Feb 30, ...).
    """
    if not isinstance(raw, str) or not _TIMESTAMP_RE.fullmatch(raw):
        raise DecodeError(field, raw, "expected YYYYMMDDThhmmssZ")
    try:
        parsed = datetime.strptime(raw, TIMESTAMP_LAYOUT)
    except ValueError as e:
        raise DecodeError(field, raw, str(e)) from e
    return pytz.utc.localize(parsed)


def parse_optional_timestamp(raw: Optional[str], field: str = "timestamp") -> Optional[datetime]:
    """Empty or missing strings mean the date is unset."""
    if not raw:
        return None
    return parse_timestamp(raw, field)


def format_timestamp(value: datetime) -> str:
    """Format ``value`` as ``YYYYMMDDThhmmssZ``.

    Naive datetimes are taken to be UTC already; aware ones are normalised to
    UTC. Sub-second precision is dropped.
    """
    if value.tzinfo is not None:
        value = value.astimezone(pytz.utc)
    # strftime does not pad years below 1000 on every platform
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"T{value.hour:02d}{value.minute:02d}{value.second:02d}Z"
    )


def format_optional_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return format_timestamp(value)
