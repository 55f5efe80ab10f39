from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AdminCredential:
    """Username and password presented on the admin path."""

    username: str
    password: str


@dataclass(frozen=True)
class RSVPSubmissionDTO:
    """A validated, normalized submission that has not been stored yet."""

    name: str
    guest_count: int
    email: str = ""
    phone: str = ""
    attending: str = ""
    meal: str = ""
    allergies: str = ""
    message: str = ""
    created_at: str | None = None
    ip: str = ""


@dataclass(frozen=True)
class RSVPRecordDTO:
    """A stored RSVP as returned by the storage adapters."""

    id: str
    name: str
    guest_count: int
    email: str
    phone: str
    attending: str
    meal: str
    allergies: str
    message: str
    created_at: str
    ip: str

    @classmethod
    def from_submission(cls, record_id: str, submission: RSVPSubmissionDTO) -> "RSVPRecordDTO":
        return cls(
            id=record_id,
            name=submission.name,
            guest_count=submission.guest_count,
            email=submission.email,
            phone=submission.phone,
            attending=submission.attending,
            meal=submission.meal,
            allergies=submission.allergies,
            message=submission.message,
            created_at=submission.created_at or "",
            ip=submission.ip,
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire shape, using the same field names as the stored layout."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "attending": self.attending,
            "guestCount": self.guest_count,
            "meal": self.meal,
            "allergies": self.allergies,
            "message": self.message,
            "createdAt": self.created_at,
            "ip": self.ip,
        }
