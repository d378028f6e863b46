import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, Field

from src.guests.dependencies import get_guest_write_model
from src.guests.repository.write_models import GuestWriteModel
from src.guests.urls import GUESTS_URL
from src.guests.validation import validate_submission

logger = logging.getLogger(__name__)

router = APIRouter()


class SubmitRSVPResponse(BaseModel):
    inserted_id: UUID = Field(serialization_alias="insertedId")


@router.post(GUESTS_URL, response_model=SubmitRSVPResponse)
async def submit_rsvp(
    payload: dict[str, Any] = Body(...),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> SubmitRSVPResponse:
    """
    Record a public RSVP.

    The body is validated as a whole before the store is touched: name and
    email are required, adults/children default to 1/0, phone and message
    default to null.
    """
    submission = validate_submission(payload)
    inserted_id = await write_model.insert(submission)
    logger.info("Guest inserted: %s", inserted_id)
    return SubmitRSVPResponse(inserted_id=inserted_id)
