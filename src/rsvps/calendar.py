"""Calendar invite (ICS) for the event."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from src.config.settings import Settings

PRODID = "-//Event RSVP//EN"


@dataclass(frozen=True)
class EventDetails:
    title: str
    description: str
    venue: str
    address: str
    start: datetime  # wall-clock time in `tzid`
    end: datetime
    tzid: str

    @property
    def location(self) -> str:
        return ", ".join(part for part in (self.venue, self.address) if part)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventDetails":
        return cls(
            title=settings.event_title,
            description=settings.event_description,
            venue=settings.event_venue,
            address=settings.event_address,
            start=datetime.fromisoformat(settings.event_start),
            end=datetime.fromisoformat(settings.event_end),
            tzid=settings.event_timezone,
        )


def escape_text(value: str) -> str:
    return (
        str(value or "")
        .replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace(",", "\\,")
        .replace(";", "\\;")
    )


def format_local(value: datetime) -> str:
    return value.strftime("%Y%m%dT%H%M00")


def format_utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")


def build_invite(
    event: EventDetails,
    now: datetime | None = None,
    uid: str | None = None,
) -> str:
    """Build the invite text. DTSTAMP is always rendered in UTC."""
    dtstamp = format_utc(now or datetime.now(UTC))
    uid = uid or f"{uuid4()}@rsvp"

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART;TZID={event.tzid}:{format_local(event.start)}",
        f"DTEND;TZID={event.tzid}:{format_local(event.end)}",
        f"SUMMARY:{escape_text(event.title)}",
        f"DESCRIPTION:{escape_text(event.description)}",
        f"LOCATION:{escape_text(event.location)}",
        # reminder one day before
        "BEGIN:VALARM",
        "TRIGGER:-P1D",
        "ACTION:DISPLAY",
        "DESCRIPTION:Reminder",
        "END:VALARM",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines)
