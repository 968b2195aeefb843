from typing import List

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from subway.core.exceptions import DuplicateStationNameError, StationNotFoundError
from subway.models.station import Station
from subway.repositories.station_repository import StationRepository

logger = structlog.get_logger(__name__)


class StationService:
    """
    Create, list and delete operations over the station registry.

    Each public method runs as a single transaction on the session it was
    given and commits before returning.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.station_repo = StationRepository(db)

    async def create(self, name: str) -> Station:
        """
        Register a new station.

        The existence check gives a clean error in the common case; the
        unique constraint on `name` still catches concurrent inserts, which
        the repository reports as the same `DuplicateStationNameError`.

        Raises:
            DuplicateStationNameError: a station with this name already exists.
        """
        if await self.station_repo.get_by_name(name) is not None:
            raise DuplicateStationNameError(name)

        station = await self.station_repo.add(name)
        await self.db.commit()
        logger.info("station_created", station_id=station.id, name=station.name)
        return station

    async def list(self) -> List[Station]:
        return await self.station_repo.list_stations()

    async def get(self, station_id: int) -> Station:
        station = await self.station_repo.get_by_id(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    async def delete(self, station_id: int) -> None:
        """
        Permanently remove a station. Its name becomes available again.

        Raises:
            StationNotFoundError: no station has this id.
        """
        station = await self.get(station_id)
        await self.station_repo.delete(station)
        await self.db.commit()
        logger.info("station_deleted", station_id=station_id)
