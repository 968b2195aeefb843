from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from subway.core.exceptions import DuplicateStationNameError
from subway.models.station import Station


class StationRepository:
    """
    Repository for managing subway station persistence.

    This repository encapsulates all database operations related to
    `Station` entities. It never commits: transaction boundaries belong
    to the service layer.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with an active database session.

        Args:
            db: Asynchronous SQLAlchemy session.
        """
        self.db = db

    async def get_by_id(self, station_id: int) -> Optional[Station]:
        """
        Return a station by its internal DB id, or None if not found.
        """
        stmt = select(Station).where(Station.id == station_id)
        res = await self.db.execute(stmt)
        return res.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Station]:
        """
        Return the station with exactly this name, or None.
        """
        stmt = select(Station).where(Station.name == name)
        res = await self.db.execute(stmt)
        return res.scalar_one_or_none()

    async def add(self, name: str) -> Station:
        """
        Insert a new station and flush it to obtain its generated id.

        Args:
            name: Station name.

        Returns:
            The newly created `Station` instance.

        Raises:
            DuplicateStationNameError: if the unique constraint on `name`
                rejects the insert. The session is rolled back first.
        """
        station = Station(name=name)
        self.db.add(station)

        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateStationNameError(name) from e

        return station

    async def list_stations(self) -> List[Station]:
        """
        List all stations in insertion order.
        """
        stmt = select(Station).order_by(Station.id.asc())
        res = await self.db.execute(stmt)
        return list(res.scalars().all())

    async def delete(self, station: Station) -> None:
        await self.db.delete(station)
        await self.db.flush()
