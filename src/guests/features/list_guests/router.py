from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.admin.dependencies import require_admin
from src.guests.dependencies import get_guest_read_model
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import GUESTS_URL

router = APIRouter()


class GuestResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    email: str
    phone: str | None = None
    adults: int
    children: int
    message: str | None = None
    created_at: datetime | None = None


@router.get(GUESTS_URL, response_model=list[GuestResponse], dependencies=[Depends(require_admin)])
async def list_guests(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestResponse]:
    """All RSVPs, most recent first. Admin only."""
    records = await read_model.list_all()
    return [
        GuestResponse(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            adults=record.adults,
            children=record.children,
            message=record.message,
            created_at=record.created_at,
        )
        for record in records
    ]
