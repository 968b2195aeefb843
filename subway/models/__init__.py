from subway.models.base import Base
from subway.models.station import Station

__all__ = ["Base", "Station"]
