"""Guest write model - inserts RSVPs and returns plain ids, never ORM models."""

import asyncio
import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.config.settings import settings
from src.errors import StoreError
from src.guests.dtos import GuestSubmission
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class GuestWriteModel(ABC):
    @abstractmethod
    async def insert(self, submission: GuestSubmission) -> UUID:
        """
        Persist a validated submission and return the id assigned by the store.
        Raises StoreError on any persistence failure; nothing is retried.
        """
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    """SQL implementation of the guest write model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.timeout_seconds = timeout_seconds or settings.store_timeout_seconds

    async def insert(self, submission: GuestSubmission) -> UUID:
        try:
            async with asyncio.timeout(self.timeout_seconds):
                async with self.async_session_manager(
                    session_overwrite=self.session_overwrite
                ) as session:
                    guest = Guest(
                        name=submission.name,
                        email=submission.email,
                        phone=submission.phone,
                        adults=submission.adults,
                        children=submission.children,
                        message=submission.message,
                    )
                    session.add(guest)
                    await session.flush()
                    guest_id = guest.uuid
        except (SQLAlchemyError, TimeoutError) as e:
            logger.exception("Failed to insert guest")
            raise StoreError("Failed to save RSVP") from e

        return guest_id
