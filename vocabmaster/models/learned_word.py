"""ORM model for words a user has marked as learned."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from vocabmaster.db.base import Base


class LearnedWord(Base):
    """Per-user record marking a vocabulary word as already studied."""

    __tablename__ = "learned_words"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    word: Mapped[str] = mapped_column(String(100), nullable=False)
    learned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (UniqueConstraint("user_id", "word", name="uq_learned_words_user_word"),)

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return f"LearnedWord(id={self.id!r}, user_id={self.user_id!r}, word={self.word!r})"
