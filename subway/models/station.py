from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from subway.models.base import Base


class Station(Base):
    """
    Subway station entity.

    A station is identified by its generated `id`; its `name` must be unique
    among all stations currently stored.
    """

    __tablename__ = "stations"

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Internal unique identifier for the station",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Station name, unique across the registry",
    )

    # ------------------------------------------------------------------
    # Constraints
    # ------------------------------------------------------------------

    __table_args__ = (
        UniqueConstraint("name", name="uq_station_name"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"Station(id={self.id!r}, name={self.name!r})"
