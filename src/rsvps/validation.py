"""Validation and normalization of raw RSVP submissions.

Everything here is pure: no storage, no clock unless a caller asks for it.
"""

import math
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from src.rsvps.dtos import RSVPSubmissionDTO
from src.rsvps.errors import ValidationError

DEFAULT_MAX_GUEST_COUNT = 50

OPTIONAL_TEXT_FIELDS = ("email", "phone", "attending", "meal", "allergies", "message")


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def utc_now_iso() -> str:
    return format_timestamp(datetime.now(UTC))


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_guest_count(value: Any, max_guest_count: int = DEFAULT_MAX_GUEST_COUNT) -> int:
    """Coerce a guest count to an int within 1..max_guest_count."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 1
    if isinstance(value, bool):
        raise ValidationError("invalid guest count")

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError("invalid guest count")
    elif isinstance(value, (int, float)):
        number = value
    else:
        raise ValidationError("invalid guest count")

    if isinstance(number, float):
        if not math.isfinite(number) or not number.is_integer():
            raise ValidationError("invalid guest count")
        number = int(number)

    if number < 1 or number > max_guest_count:
        raise ValidationError("invalid guest count")
    return number


def validate_submission(
    raw: Any,
    *,
    max_guest_count: int = DEFAULT_MAX_GUEST_COUNT,
    ip: str = "",
) -> RSVPSubmissionDTO:
    """
    Validate a raw submission and return its canonical shape.

    Raises ValidationError("name required") for a missing or blank name and
    ValidationError("invalid guest count") for counts outside 1..max_guest_count.
    A createdAt in the body is ignored; the service stamps the server clock.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("invalid payload")

    name = _clean_text(raw.get("name"))
    if not name:
        raise ValidationError("name required")

    guest_count = parse_guest_count(raw.get("guestCount"), max_guest_count)
    optional = {field: _clean_text(raw.get(field)) for field in OPTIONAL_TEXT_FIELDS}

    return RSVPSubmissionDTO(
        name=name,
        guest_count=guest_count,
        ip=_clean_text(ip),
        **optional,
    )
