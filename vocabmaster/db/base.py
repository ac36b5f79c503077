"""SQLAlchemy declarative base for VocabMaster models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


metadata = Base.metadata
