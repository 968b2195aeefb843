from subway.core.db import engine
from subway.models import Base


async def init_db() -> None:
    """
    Initialize the database schema.

    Creates the `stations` table (and its unique constraint on `name`)
    if it does not exist yet. Schema changes beyond that are expected to
    go through a migration tool.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
