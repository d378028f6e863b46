from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.guests.repository.orm_models import Guest


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive timestamps; they were written as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class GuestSubmission:
    """A validated and normalized RSVP, ready for insertion."""

    name: str
    email: str
    phone: str | None = None
    adults: int = 1
    children: int = 0
    message: str | None = None


@dataclass(frozen=True)
class GuestRecordDTO:
    """A stored RSVP. Returned by read models, never an ORM object."""

    id: UUID
    name: str
    email: str
    phone: str | None
    adults: int
    children: int
    message: str | None
    created_at: datetime | None

    @property
    def attendees(self) -> int:
        return self.adults + self.children

    @classmethod
    def from_guest(cls, guest: "Guest") -> "GuestRecordDTO":
        return cls(
            id=guest.uuid,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
            adults=guest.adults,
            children=guest.children,
            message=guest.message,
            created_at=as_utc(guest.created_at),
        )


@dataclass(frozen=True)
class GuestStatsDTO:
    total_guests: int = 0
    total_adults: int = 0
    total_children: int = 0
    total_attendees: int = 0
