"""Fixtures and sample rows for seeding record stores.

`SAMPLE_RECORDS` describes one small platform:

- two instances, ``dev355071`` (the configured one) and ``prod``;
- defaults for ``mail.enabled`` and ``theme``, overridden per instance;
- a whitelist naming Alice and the ops mailbox;
- exempt groups ``grp-admin`` and ``grp-qa``;
- Bob (grp-qa, exempt), Carol (grp-other, not exempt), Dave (grp-admin but
  inactive), Erin (no groups) in the directory.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import pytest
from sqlalchemy import insert

from instancekit.adapters.db.schema import RECORD_SETS
from instancekit.adapters.record_store import InMemoryRecordStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

# pylint: disable=redefined-outer-name

WHITELIST = "Alice@Example.com;ops-team@example.com"
GROUP_IDS = "grp-admin,grp-qa"
INSTANCE_NAME = "dev355071"

SAMPLE_RECORDS: dict[str, list[dict[str, Any]]] = {
    "instances": [
        {"sys_id": "inst-dev", "name": INSTANCE_NAME, "description": "Dev"},
        {"sys_id": "inst-prod", "name": "prod", "description": "Production"},
    ],
    "properties": [
        {"sys_id": "prop-1", "key": "mail.enabled", "default_value": "false"},
        {"sys_id": "prop-2", "key": "theme", "default_value": "light"},
        {"sys_id": "prop-3", "key": "support.email", "default_value": None},
    ],
    "property_overrides": [
        {"sys_id": "ovr-1", "instance": "inst-dev", "key": "mail.enabled", "value": "true"},
        {"sys_id": "ovr-2", "instance": "inst-prod", "key": "theme", "value": "dark"},
        {"sys_id": "ovr-3", "instance": "inst-dev", "key": "feature.beta", "value": "on"},
    ],
    "sys_properties": [
        {"name": "instance_name", "value": INSTANCE_NAME},
        {"name": "mck.email.subProdEmail.ReceivingAddresses", "value": WHITELIST},
        {"name": "mck.email.subProdEmail.ReceivingGroupIds", "value": GROUP_IDS},
    ],
    "users": [
        {"sys_id": "usr-alice", "user_name": "alice", "email": "alice@example.com", "active": True},
        {"sys_id": "usr-bob", "user_name": "bob", "email": "bob@example.com", "active": True},
        {"sys_id": "usr-carol", "user_name": "carol", "email": "carol@example.com", "active": True},
        {"sys_id": "usr-dave", "user_name": "dave", "email": "dave@example.com", "active": False},
        {"sys_id": "usr-erin", "user_name": "erin", "email": "erin@example.com", "active": True},
    ],
    "group_members": [
        {"sys_id": "gm-1", "user": "usr-bob", "group": "grp-qa"},
        {"sys_id": "gm-2", "user": "usr-carol", "group": "grp-other"},
        {"sys_id": "gm-3", "user": "usr-dave", "group": "grp-admin"},
    ],
}


def seed_memory(
    store: InMemoryRecordStore, records: Mapping[str, list[dict[str, Any]]]
) -> InMemoryRecordStore:
    """Add every row of `records` to an in-memory store."""
    for record_set, rows in records.items():
        for row in rows:
            store.add(record_set, **row)
    return store


def seed_connection(
    connection: Connection, records: Mapping[str, list[dict[str, Any]]]
) -> None:
    """Insert every row of `records` through `connection` and commit.

    Tables are filled in schema order so foreign keys are satisfied.
    """
    for name, table in RECORD_SETS.items():
        if rows := records.get(name):
            connection.execute(insert(table), rows)
    connection.commit()


@pytest.fixture
def sample_records() -> dict[str, list[dict[str, Any]]]:
    """A fresh deep-enough copy of `SAMPLE_RECORDS` that tests may edit."""
    return {name: [dict(row) for row in rows] for name, rows in SAMPLE_RECORDS.items()}


@pytest.fixture
def memory_store(sample_records) -> InMemoryRecordStore:
    """An InMemoryRecordStore seeded with the sample records."""
    return seed_memory(InMemoryRecordStore(), sample_records)


@pytest.fixture
def make_memory_store() -> Callable[..., InMemoryRecordStore]:
    """Factory fixture: build an InMemoryRecordStore from explicit rows.

    Example:
        ```py
        store = make_memory_store(instances=[{"sys_id": "i1", "name": "dev"}])
        ```
    """

    def _make(**records: list[dict[str, Any]]) -> InMemoryRecordStore:
        return seed_memory(InMemoryRecordStore(), records)

    return _make
