import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class StationError(Exception):
    """
    Base class for station registry errors.

    Each subclass carries the HTTP status it is surfaced with, so the
    service layer can raise without knowing about FastAPI.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class DuplicateStationNameError(StationError):
    """Raised when a station with the same name already exists."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, name: str):
        super().__init__(f"Station with name '{name}' already exists")
        self.name = name


class StationNotFoundError(StationError):
    """Raised when no station matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, station_id: int):
        super().__init__(f"Station {station_id} not found")
        self.station_id = station_id


async def station_error_handler(request: Request, exc: StationError) -> JSONResponse:
    logger.warning(
        "station_request_rejected",
        path=request.url.path,
        status=exc.status_code,
        detail=exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input is a plain client error here, not FastAPI's default 422.
    logger.warning("malformed_request", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error-to-HTTP translation handlers to the application."""
    app.add_exception_handler(StationError, station_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
