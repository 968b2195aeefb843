from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from subway.core.config import settings
from subway.core.db import get_db
from subway.models.station import Station

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Service health check")
def health():
    """
    Liveness only: answers as long as the process serves requests,
    without touching the database.
    """
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@router.get("/health/db", summary="Station store health check")
async def health_db(db: AsyncSession = Depends(get_db)):
    """
    Readiness of the station store.

    Counts rows in `stations`, which fails if the database is unreachable
    or the schema was never created at startup. The count is reported so
    an operator can tell an empty registry from a wrong `DATABASE_URL`.
    """
    stations = (await db.execute(select(func.count(Station.id)))).scalar_one()
    return {"status": "ok", "db": "ok", "stations": stations}
