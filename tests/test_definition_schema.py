"""Tests for parsing dictionary API entries into capped payloads."""

from __future__ import annotations

import pytest

from vocabmaster.schemas.definition import (
    MAX_DEFINITIONS_PER_MEANING,
    MAX_MEANINGS,
    MAX_PHONETICS,
    MAX_RELATED_WORDS,
    DefinitionPayload,
)


@pytest.fixture
def hello_entry() -> dict:
    """Trimmed dictionaryapi.dev response entry for 'hello'."""
    return {
        "word": "hello",
        "phonetics": [
            {"text": "/həˈləʊ/"},
            {"text": "/həˈloʊ/", "audio": "https://api.dictionaryapi.dev/media/hello-us.mp3"},
            {},
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "\"Hello!\" or an equivalent greeting.",
                        "synonyms": ["greeting"],
                        "antonyms": [],
                    }
                ],
            },
            {
                "partOfSpeech": "interjection",
                "definitions": [
                    {
                        "definition": "A greeting said when meeting someone.",
                        "example": "Hello, everyone.",
                    }
                ],
            },
        ],
    }


def test_from_api_entry_maps_fields(hello_entry: dict) -> None:
    payload = DefinitionPayload.from_api_entry(hello_entry)

    assert [p.text for p in payload.phonetics] == ["/həˈloʊ/", "/həˈləʊ/"]
    assert payload.phonetics[0].audio_url.endswith("hello-us.mp3")
    assert [m.part_of_speech for m in payload.meanings] == ["noun", "interjection"]
    assert payload.meanings[0].definitions[0].synonyms == ["greeting"]
    assert payload.meanings[1].definitions[0].example == "Hello, everyone."
    assert payload.is_empty is False


def test_phonetics_prefer_audio_and_are_capped() -> None:
    entry = {
        "phonetics": [
            {"text": "/a/"},
            {"text": "/b/", "audio": "b.mp3"},
            {"text": "/c/"},
            {"text": "/d/", "audio": "d.mp3"},
            {"text": "/e/"},
        ]
    }

    payload = DefinitionPayload.from_api_entry(entry)

    assert len(payload.phonetics) == MAX_PHONETICS
    assert [p.text for p in payload.phonetics] == ["/b/", "/d/", "/a/"]


def test_meanings_definitions_and_related_words_are_capped() -> None:
    definition = {
        "definition": "sense",
        "synonyms": [f"syn{i}" for i in range(10)],
        "antonyms": ["ant", 3, None],
    }
    entry = {
        "meanings": [
            {"partOfSpeech": f"pos{i}", "definitions": [definition] * 6} for i in range(5)
        ]
    }

    payload = DefinitionPayload.from_api_entry(entry)

    assert len(payload.meanings) == MAX_MEANINGS
    assert all(len(m.definitions) == MAX_DEFINITIONS_PER_MEANING for m in payload.meanings)
    first = payload.meanings[0].definitions[0]
    assert len(first.synonyms) == MAX_RELATED_WORDS
    assert first.antonyms == ["ant"]


def test_missing_sections_produce_empty_payload() -> None:
    payload = DefinitionPayload.from_api_entry({"word": "zzz"})

    assert payload.phonetics == []
    assert payload.meanings == []
    assert payload.is_empty is True


@pytest.mark.parametrize(
    "entry",
    [
        ["not", "an", "object"],
        {"phonetics": "oops"},
        {"meanings": {"partOfSpeech": "noun"}},
        {"meanings": [{"partOfSpeech": "noun", "definitions": "oops"}]},
    ],
)
def test_malformed_entry_raises_value_error(entry) -> None:
    with pytest.raises(ValueError):
        DefinitionPayload.from_api_entry(entry)
