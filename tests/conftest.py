"""Shared fixtures: in-memory database, settings and call-counting providers."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import vocabmaster.models  # noqa: F401  # registers tables on Base.metadata
from vocabmaster.core.config import Settings
from vocabmaster.core.random_source import RandomSource
from vocabmaster.db.base import Base
from vocabmaster.repositories.vocabulary import VocabularyRepository
from vocabmaster.schemas.definition import DefinitionPayload, Definition, Meaning, Phonetic
from vocabmaster.services.cache.membership import LearnedWordCache
from vocabmaster.services.dictionary.base import DictionaryProvider
from vocabmaster.services.http import ProviderUnavailableError
from vocabmaster.services.translation.base import TranslationProvider


class FakeDictionaryProvider(DictionaryProvider):
    """Dictionary provider answering from a dict and recording every lookup."""

    provider_name = "fake_dictionary"

    def __init__(self, entries: dict[str, DefinitionPayload] | None = None) -> None:
        self.entries = dict(entries or {})
        self.failing: set[str] = set()
        self.calls: list[str] = []

    async def lookup(self, word: str) -> DefinitionPayload | None:
        self.calls.append(word)
        if word in self.failing:
            raise ProviderUnavailableError("Request timeout", self.provider_name)
        return self.entries.get(word)


class FakeTranslationProvider(TranslationProvider):
    """Translation provider answering from a dict and recording every call."""

    provider_name = "fake_translation"

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        self.translations = dict(translations or {})
        self.failing: set[str] = set()
        self.calls: list[str] = []

    async def translate(self, word: str) -> str | None:
        self.calls.append(word)
        if word in self.failing:
            raise ProviderUnavailableError("API error: 500", self.provider_name)
        return self.translations.get(word)


def make_payload(part_of_speech: str = "noun", text: str = "A thing.") -> DefinitionPayload:
    """Build a small non-empty payload."""
    return DefinitionPayload(
        phonetics=[Phonetic(text="/θɪŋ/", audio_url="https://audio.example/thing.mp3")],
        meanings=[
            Meaning(part_of_speech=part_of_speech, definitions=[Definition(text=text)])
        ],
    )


@pytest.fixture()
def session_local() -> sessionmaker[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def session(session_local: sessionmaker[Session]) -> Iterator[Session]:
    with session_local() as db:
        yield db


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        random_seed=1234,
        bulk_request_delay_seconds=0.0,
        selector_max_attempts=5,
        learned_words_cache_ttl_seconds=900,
    )


@pytest.fixture()
def random_source() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture()
def vocabulary_repository(random_source: RandomSource) -> VocabularyRepository:
    return VocabularyRepository(random_source=random_source)


@pytest.fixture()
def learned_word_cache() -> LearnedWordCache:
    return LearnedWordCache(ttl_seconds=900.0)


@pytest.fixture()
def fake_dictionary() -> FakeDictionaryProvider:
    return FakeDictionaryProvider()


@pytest.fixture()
def fake_translation() -> FakeTranslationProvider:
    return FakeTranslationProvider()
