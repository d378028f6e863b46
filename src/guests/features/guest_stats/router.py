from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.admin.dependencies import require_admin
from src.errors import StoreError
from src.guests.dependencies import get_guest_read_model
from src.guests.reports import compute_stats
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import GUEST_STATS_URL

router = APIRouter()


class GuestStatsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_guests: int
    total_adults: int
    total_children: int
    total_attendees: int


@router.get(
    GUEST_STATS_URL, response_model=GuestStatsResponse, dependencies=[Depends(require_admin)]
)
async def guest_stats(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestStatsResponse:
    """Head counts over every stored RSVP, recomputed on each call. Admin only."""
    try:
        records = await read_model.list_all()
    except StoreError as e:
        raise StoreError("Failed to fetch stats") from e

    stats = compute_stats(records)
    return GuestStatsResponse(
        total_guests=stats.total_guests,
        total_adults=stats.total_adults,
        total_children=stats.total_children,
        total_attendees=stats.total_attendees,
    )
