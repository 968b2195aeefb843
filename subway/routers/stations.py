from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from subway.core.db import get_db
from subway.schemas.stations import StationCreate, StationOut
from subway.services.station_service import StationService

router = APIRouter(prefix="/stations", tags=["Stations"])

# Upper bound of the `Integer` id column.
MAX_STATION_ID = 2**31 - 1


@router.post(
    "",
    response_model=StationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a station",
    description=(
        "Registers a new subway station.\n\n"
        "Returns 400 if a station with the same name already exists."
    ),
)
async def create_station(
    payload: StationCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> StationOut:
    station = await StationService(db).create(payload.name)
    response.headers["Location"] = f"/stations/{station.id}"
    return StationOut.model_validate(station)


@router.get(
    "",
    response_model=List[StationOut],
    summary="List stations",
    description="Returns every registered station in creation order.",
)
async def list_stations(db: AsyncSession = Depends(get_db)) -> List[StationOut]:
    """
    List all stations.

    Always responds 200; an empty registry yields an empty array.
    """
    stations = await StationService(db).list()
    return [StationOut.model_validate(x) for x in stations]


@router.get(
    "/{station_id}",
    response_model=StationOut,
    summary="Get a station",
)
async def get_station(
    station_id: int = Path(..., ge=1, le=MAX_STATION_ID),
    db: AsyncSession = Depends(get_db),
) -> StationOut:
    station = await StationService(db).get(station_id)
    return StationOut.model_validate(station)


@router.delete(
    "/{station_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a station",
    description="Permanently removes a station. Returns 404 if the id is unknown.",
)
async def delete_station(
    station_id: int = Path(..., ge=1, le=MAX_STATION_ID),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await StationService(db).delete(station_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
