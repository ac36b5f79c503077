"""Tests for DefinitionService cache-or-fetch resolution."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from conftest import FakeDictionaryProvider, FakeTranslationProvider, make_payload
from vocabmaster.core.config import Settings
from vocabmaster.repositories.base import StorageError
from vocabmaster.repositories.vocabulary import VocabularyRepository, load_payload
from vocabmaster.schemas.word import ResolutionSource
from vocabmaster.services.cache.definition import DefinitionCache
from vocabmaster.services.definitions import DefinitionService


@pytest.fixture
def service(
    settings: Settings,
    vocabulary_repository: VocabularyRepository,
    fake_dictionary: FakeDictionaryProvider,
    fake_translation: FakeTranslationProvider,
) -> DefinitionService:
    return DefinitionService(
        settings=settings,
        definition_cache=DefinitionCache(vocabulary_repository),
        dictionary_provider=fake_dictionary,
        translation_provider=fake_translation,
    )


@pytest.mark.asyncio
async def test_second_lookup_is_served_from_cache(
    session: Session,
    service: DefinitionService,
    fake_dictionary: FakeDictionaryProvider,
    fake_translation: FakeTranslationProvider,
) -> None:
    fake_dictionary.entries["hello"] = make_payload("interjection", "A greeting.")
    fake_translation.translations["hello"] = "xin chào"

    first = await service.resolve(session, "Hello")
    second = await service.resolve(session, "hello")

    assert first.source is ResolutionSource.API
    assert second.source is ResolutionSource.CACHE
    assert second.definition == first.definition
    assert second.translation == "xin chào"
    assert fake_dictionary.calls == ["hello"]
    assert fake_translation.calls == ["hello"]


@pytest.mark.asyncio
async def test_get_or_fetch_definition_returns_payload(
    session: Session,
    service: DefinitionService,
    fake_dictionary: FakeDictionaryProvider,
) -> None:
    payload = make_payload()
    fake_dictionary.entries["thing"] = payload

    assert await service.get_or_fetch_definition(session, "thing") == payload


@pytest.mark.asyncio
async def test_new_word_is_added_to_catalogue(
    session: Session,
    service: DefinitionService,
    vocabulary_repository: VocabularyRepository,
    fake_dictionary: FakeDictionaryProvider,
) -> None:
    fake_dictionary.entries["river"] = make_payload()

    await service.resolve(session, "River")

    stored = vocabulary_repository.get_by_word(session, "river")
    assert stored is not None
    assert load_payload(stored) == fake_dictionary.entries["river"]


@pytest.mark.asyncio
async def test_both_providers_failing_returns_degraded_word(
    session: Session,
    service: DefinitionService,
    vocabulary_repository: VocabularyRepository,
    fake_dictionary: FakeDictionaryProvider,
    fake_translation: FakeTranslationProvider,
) -> None:
    vocabulary_repository.create(session, word="ghost")
    fake_dictionary.failing.add("ghost")
    fake_translation.failing.add("ghost")

    resolved = await service.resolve(session, "ghost")

    assert resolved.is_degraded
    assert resolved.word == "ghost"
    assert resolved.translation is None
    assert resolved.definition.is_empty


@pytest.mark.asyncio
async def test_degraded_response_keeps_known_translation(
    session: Session,
    service: DefinitionService,
    vocabulary_repository: VocabularyRepository,
    fake_translation: FakeTranslationProvider,
) -> None:
    vocabulary_repository.create(session, word="book", translation="sách")

    resolved = await service.resolve(session, "book")

    assert resolved.source is ResolutionSource.DEGRADED
    assert resolved.translation == "sách"
    # Known translations are not fetched again
    assert fake_translation.calls == []


@pytest.mark.asyncio
async def test_translation_only_result_is_cached_and_definition_retried(
    session: Session,
    service: DefinitionService,
    vocabulary_repository: VocabularyRepository,
    fake_dictionary: FakeDictionaryProvider,
    fake_translation: FakeTranslationProvider,
) -> None:
    fake_translation.translations["river"] = "sông"

    first = await service.resolve(session, "river")

    assert first.source is ResolutionSource.API
    assert first.translation == "sông"
    assert first.definition.is_empty
    assert vocabulary_repository.get_by_word(session, "river").translation == "sông"

    fake_dictionary.entries["river"] = make_payload()
    second = await service.resolve(session, "river")

    assert second.source is ResolutionSource.API
    assert second.definition == make_payload()
    assert second.translation == "sông"
    assert fake_dictionary.calls == ["river", "river"]
    assert fake_translation.calls == ["river"]


@pytest.mark.asyncio
async def test_blank_word_is_rejected(session: Session, service: DefinitionService) -> None:
    with pytest.raises(ValueError):
        await service.resolve(session, "  ")


@pytest.mark.asyncio
async def test_storage_errors_propagate(
    service: DefinitionService, vocabulary_repository: VocabularyRepository, monkeypatch
) -> None:
    def _boom(session, word):
        raise StorageError("get vocabulary by word", "db down")

    monkeypatch.setattr(vocabulary_repository, "get_by_word", _boom)

    with pytest.raises(StorageError):
        await service.resolve(object(), "hello")
