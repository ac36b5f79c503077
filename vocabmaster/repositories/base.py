"""Shared repository helpers used by concrete persistence classes."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """Raised when the vocabulary or learned-word store fails."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"[{operation}] {message}")


@contextmanager
def storage_errors(session: Session, operation: str) -> Iterator[None]:
    """Roll back and re-raise SQLAlchemy failures as ``StorageError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"[Storage] {operation} failed: {exc}")
        session.rollback()
        raise StorageError(operation, str(exc)) from exc


class BaseRepository(Generic[T]):
    """Small abstraction around SQLAlchemy session interactions."""

    def __init__(self, model: type[T]):
        self._model = model

    @property
    def model(self) -> type[T]:
        """Return the SQLAlchemy model handled by the repository."""

        return self._model

    def add(self, session: Session, instance: T) -> T:
        """Persist a new instance and refresh it with database defaults."""

        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def get(self, session: Session, identifier: int) -> T | None:
        """Fetch a single instance by primary key."""

        with storage_errors(session, f"get {self._model.__name__}"):
            return session.get(self._model, identifier)

    def list_all(self, session: Session) -> list[T]:
        """Return all instances of the model."""

        with storage_errors(session, f"list {self._model.__name__}"):
            result = session.execute(select(self._model))
            return list(result.scalars())
