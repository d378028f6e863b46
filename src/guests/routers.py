from fastapi import APIRouter

from .features.export_guests.router import router as export_guests_router
from .features.guest_stats.router import router as guest_stats_router
from .features.list_guests.router import router as list_guests_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(submit_rsvp_router)
router.include_router(guest_stats_router)
router.include_router(export_guests_router)
router.include_router(list_guests_router)
