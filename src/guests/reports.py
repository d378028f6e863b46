"""Aggregate statistics and CSV export over stored RSVPs."""

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import datetime

from src.guests.dtos import GuestRecordDTO, GuestStatsDTO, as_utc

CSV_HEADERS = [
    "Name",
    "Email",
    "Phone",
    "Adults",
    "Children",
    "Total",
    "Message",
    "RSVP Date",
]


def compute_stats(records: Iterable[GuestRecordDTO]) -> GuestStatsDTO:
    total_guests = total_adults = total_children = 0
    for record in records:
        total_guests += 1
        total_adults += record.adults
        total_children += record.children

    return GuestStatsDTO(
        total_guests=total_guests,
        total_adults=total_adults,
        total_children=total_children,
        total_attendees=total_adults + total_children,
    )


def format_rsvp_date(created_at: datetime | None) -> str:
    """Render a timestamp in the server's locale, local time. Naive values are UTC."""
    if created_at is None:
        return ""
    return as_utc(created_at).astimezone().strftime("%x %X")


def to_csv(records: Sequence[GuestRecordDTO]) -> str:
    """
    Serialize records in the given order, one row each after the header.

    Text cells holding a comma, quote or newline are quoted with inner quotes
    doubled; numbers are written bare; missing text is an empty cell.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.name or "",
                record.email or "",
                record.phone or "",
                record.adults,
                record.children,
                record.attendees,
                record.message or "",
                format_rsvp_date(record.created_at),
            ]
        )
    return buffer.getvalue()
