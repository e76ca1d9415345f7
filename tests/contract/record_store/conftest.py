"""Fixtures for RecordStore contract tests.

`record_store` is parametrized over every adapter and seeded with the
sample records, so each contract test runs once per backend.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from instancekit.adapters.record_store import SqlAlchemyRecordStore
from instancekit.interfaces.record_store import RecordStore
from tests.fixtures.datagen import seed_connection

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory", "sql_memory", "sql_file"])
def record_store(request, sample_records) -> Iterator[RecordStore]:
    """A seeded RecordStore for each backend.

    - ``memory``: `InMemoryRecordStore`.
    - ``sql_memory``: SQLAlchemy store over in-memory SQLite (`create_all`).
    - ``sql_file``: SQLAlchemy store over a file DB migrated with Alembic.
    """
    if request.param == "memory":
        yield request.getfixturevalue("memory_store")
        return

    engine_fixture = (
        "sqlite_engine_memory" if request.param == "sql_memory" else "sqlite_engine_file"
    )
    engine = request.getfixturevalue(engine_fixture)
    with engine.connect() as connection:
        seed_connection(connection, sample_records)
        yield SqlAlchemyRecordStore(connection)
