"""ORM model for catalogued vocabulary entries and their cached definitions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from vocabmaster.db.base import Base

# Version of the JSON layout stored in phonetics_json / meanings_json
DEFINITION_PAYLOAD_VERSION = 1


def normalize_word(word: str) -> str:
    """Return the canonical (case-insensitive) form used for storage and lookups."""
    return word.strip().lower()


class Vocabulary(Base):
    """A catalogued word with its cached definition and translation."""

    __tablename__ = "vocabularies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    translation: Mapped[str | None] = mapped_column(Text, nullable=True)
    phonetics_json: Mapped[str | None] = mapped_column(Text, nullable=True)
    meanings_json: Mapped[str | None] = mapped_column(Text, nullable=True)
    payload_version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFINITION_PAYLOAD_VERSION, server_default="1"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return f"Vocabulary(id={self.id!r}, word={self.word!r})"
