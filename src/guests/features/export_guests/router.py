from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Response

from src.admin.dependencies import require_admin
from src.errors import StoreError
from src.guests.dependencies import get_guest_read_model
from src.guests.reports import to_csv
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import EXPORT_GUESTS_URL

router = APIRouter()


def export_filename(today: datetime | None = None) -> str:
    today = today or datetime.now(UTC)
    return f"anniversary-guests-{today.date().isoformat()}.csv"


@router.get(EXPORT_GUESTS_URL, dependencies=[Depends(require_admin)])
async def export_guests(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> Response:
    """
    Download every RSVP as a CSV attachment. Admin only.

    The CSV is built in full before responding, so a store failure yields a
    JSON error and never a truncated file.
    """
    try:
        records = await read_model.list_all()
    except StoreError as e:
        raise StoreError("Failed to export guests") from e

    return Response(
        content=to_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )
