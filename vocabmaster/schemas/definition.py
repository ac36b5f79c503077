"""Pydantic schemas for cached dictionary definition payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

MAX_PHONETICS = 3
MAX_MEANINGS = 3
MAX_DEFINITIONS_PER_MEANING = 3
MAX_RELATED_WORDS = 5  # synonyms / antonyms per definition


class Phonetic(BaseModel):
    """A pronunciation with optional audio recording."""

    text: str = ""
    audio_url: str = ""


class Definition(BaseModel):
    """A single sense of a word within one part of speech."""

    text: str = ""
    example: str = ""
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class Meaning(BaseModel):
    """Definitions grouped under one part of speech."""

    part_of_speech: str = ""
    definitions: list[Definition] = Field(default_factory=list)


class DefinitionPayload(BaseModel):
    """Phonetics and meanings resolved for a word.

    Missing data is always an empty list so that "cached but empty" never
    looks like a missing field.
    """

    phonetics: list[Phonetic] = Field(default_factory=list)
    meanings: list[Meaning] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return True when neither phonetics nor meanings are present."""
        return not self.phonetics and not self.meanings

    @classmethod
    def from_api_entry(cls, entry: dict[str, Any]) -> DefinitionPayload:
        """
        Build a capped payload from one dictionary API entry.

        Args:
            entry: First element of the dictionary API response array.

        Returns:
            DefinitionPayload limited to the configured list sizes.

        Raises:
            ValueError: If the entry does not have the expected shape.
        """
        if not isinstance(entry, dict):
            raise ValueError(f"Dictionary entry must be an object, got {type(entry).__name__}")

        return cls(
            phonetics=_parse_phonetics(entry.get("phonetics") or []),
            meanings=_parse_meanings(entry.get("meanings") or []),
        )


def _as_list(value: Any, field_name: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' must be a list, got {type(value).__name__}")
    return value


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _words(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item][:MAX_RELATED_WORDS]


def _parse_phonetics(raw: Any) -> list[Phonetic]:
    phonetics = [
        Phonetic(text=_text(item.get("text")), audio_url=_text(item.get("audio")))
        for item in _as_list(raw, "phonetics")
        if isinstance(item, dict)
    ]
    phonetics = [p for p in phonetics if p.text or p.audio_url]
    # Stable sort: entries carrying audio first, original order otherwise
    phonetics.sort(key=lambda p: not p.audio_url)
    return phonetics[:MAX_PHONETICS]


def _parse_meanings(raw: Any) -> list[Meaning]:
    meanings: list[Meaning] = []
    for item in _as_list(raw, "meanings"):
        if not isinstance(item, dict):
            continue
        definitions = [
            Definition(
                text=_text(d.get("definition")),
                example=_text(d.get("example")),
                synonyms=_words(d.get("synonyms")),
                antonyms=_words(d.get("antonyms")),
            )
            for d in _as_list(item.get("definitions") or [], "definitions")
            if isinstance(d, dict)
        ]
        meanings.append(
            Meaning(
                part_of_speech=_text(item.get("partOfSpeech")),
                definitions=definitions[:MAX_DEFINITIONS_PER_MEANING],
            )
        )
        if len(meanings) == MAX_MEANINGS:
            break
    return meanings
