from pydantic import BaseModel, ConfigDict, Field


class StationCreate(BaseModel):
    """
    Request body for registering a station.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Station name, unique across the registry.",
        examples=["강남역"],
    )


class StationOut(BaseModel):
    """
    Public representation of a stored subway station.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
