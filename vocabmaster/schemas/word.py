"""Pydantic schemas for resolved words and learned-word listings."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from vocabmaster.schemas.definition import DefinitionPayload


class ResolutionSource(str, enum.Enum):
    """Where the definition of a resolved word came from."""

    CACHE = "cache"
    API = "api"
    DEGRADED = "degraded"


class ResolvedWord(BaseModel):
    """A selected word together with whatever definition data could be resolved."""

    word: str
    translation: str | None = None
    definition: DefinitionPayload = Field(default_factory=DefinitionPayload)
    source: ResolutionSource = ResolutionSource.CACHE

    @property
    def is_degraded(self) -> bool:
        """Return True when no provider data could be obtained."""
        return self.source is ResolutionSource.DEGRADED


class LearnedWordRead(BaseModel):
    """Representation of a persisted learned-word record."""

    id: int
    user_id: int
    word: str
    learned_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LearnedWordPage(BaseModel):
    """One page of a user's learned words."""

    items: list[LearnedWordRead] = Field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    page: int = 1
    page_size: int = 20
