"""Pydantic schemas shared across stores and services."""

from .definition import Definition, DefinitionPayload, Meaning, Phonetic
from .word import LearnedWordPage, LearnedWordRead, ResolutionSource, ResolvedWord

__all__ = [
    "Definition",
    "DefinitionPayload",
    "Meaning",
    "Phonetic",
    "LearnedWordPage",
    "LearnedWordRead",
    "ResolutionSource",
    "ResolvedWord",
]
