from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models inheriting from it are registered in `Base.metadata`, which is
    what `init_db` and the test fixtures use to create the schema.
    """
    pass
