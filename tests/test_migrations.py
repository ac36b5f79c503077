"""Tests for the Alembic migrations that create the catalogue tables."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any

import pytest
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "alembic" / "versions"
MIGRATIONS = [
    "20261017_01_create_vocabularies_table.py",
    "20261017_02_create_learned_words_table.py",
]


def _load(filename: str):
    spec = importlib.util.spec_from_file_location(filename[:-3], VERSIONS_DIR / filename)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_migrations_create_expected_schema() -> None:
    migrations = [_load(name) for name in MIGRATIONS]
    assert migrations[1].down_revision == migrations[0].revision
    engine = create_engine("sqlite+pysqlite:///:memory:")
    originals: list[Any] = [m.op for m in migrations]

    try:
        with engine.begin() as connection:
            context = MigrationContext.configure(connection=connection)
            for migration in migrations:
                migration.op = Operations(context)
                migration.upgrade()

            inspector = inspect(connection)
            vocab_columns = {col["name"]: col for col in inspector.get_columns("vocabularies")}
            assert {
                "id",
                "word",
                "translation",
                "phonetics_json",
                "meanings_json",
                "payload_version",
                "created_at",
                "updated_at",
            }.issubset(vocab_columns)
            assert vocab_columns["word"]["nullable"] is False
            assert any(
                c["column_names"] == ["word"]
                for c in inspector.get_unique_constraints("vocabularies")
            )

            learned_unique = inspector.get_unique_constraints("learned_words")
            assert any(c["column_names"] == ["user_id", "word"] for c in learned_unique)

            connection.execute(text("INSERT INTO vocabularies (word) VALUES ('apple')"))
            row = connection.execute(
                text("SELECT payload_version FROM vocabularies WHERE word = 'apple'")
            ).one()
            assert row.payload_version == 1

            connection.execute(
                text("INSERT INTO learned_words (user_id, word) VALUES (1, 'apple')")
            )
            with pytest.raises(IntegrityError):
                connection.execute(
                    text("INSERT INTO learned_words (user_id, word) VALUES (1, 'apple')")
                )
    finally:
        for migration, original in zip(migrations, originals):
            migration.op = original
