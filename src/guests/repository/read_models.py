import abc
import asyncio
import logging
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.config.settings import settings
from src.errors import StoreError
from src.guests.dtos import GuestRecordDTO
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_all(self) -> list[GuestRecordDTO]:
        """
        Return every stored RSVP, most recent first.
        The full set is returned each time; there is no pagination.
        """
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of the guest read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.timeout_seconds = timeout_seconds or settings.store_timeout_seconds

    async def list_all(self) -> list[GuestRecordDTO]:
        try:
            async with asyncio.timeout(self.timeout_seconds):
                async with self.async_session_manager(
                    auto_commit=False, session_overwrite=self.session_overwrite
                ) as session:
                    result = await session.execute(
                        select(Guest).order_by(Guest.created_at.desc())
                    )
                    return [GuestRecordDTO.from_guest(guest) for guest in result.scalars().all()]
        except (SQLAlchemyError, TimeoutError) as e:
            logger.exception("Failed to fetch guests")
            raise StoreError("Failed to fetch guests") from e
