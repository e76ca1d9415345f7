"""In-memory RecordStore implementation for testing purposes."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from instancekit.adapters.db.schema import RECORD_SETS
from instancekit.interfaces.record_store import (
    Record,
    RecordStore,
    UnknownFieldError,
    UnknownRecordSetError,
)

DEFAULT_FIELDS: dict[str, tuple[str, ...]] = {
    name: tuple(table.c.keys()) for name, table in RECORD_SETS.items()
}


class InMemoryRecordStore(RecordStore):
    """Dict-backed RecordStore.

    Records are kept per record set in insertion order, and `find_one`
    returns the earliest match. Known record sets and their fields default to
    the SQL schema so that both adapters reject the same queries.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios.

    Args:
        fields: Record set name → allowed field names.
    """

    def __init__(self, fields: Mapping[str, Collection[str]] | None = None) -> None:
        self._fields = {
            name: tuple(names) for name, names in (fields or DEFAULT_FIELDS).items()
        }
        self._records: dict[str, list[dict[str, Any]]] = {
            name: [] for name in self._fields
        }

    # --- seeding ---

    def add(self, record_set: str, **values: Any) -> Record:
        """Insert a record; fields not given are stored as None."""
        fields = self._fields_of(record_set)
        self._check_fields(record_set, values)
        record = {field: values.get(field) for field in fields}
        self._records[record_set].append(record)
        return dict(record)

    # --- queries ---

    def find_one(self, record_set: str, **predicates: Any) -> Record | None:
        for record in self._matching(record_set, predicates):
            return dict(record)
        return None

    def find_many(self, record_set: str, **predicates: Any) -> list[Record]:
        return [dict(record) for record in self._matching(record_set, predicates)]

    # --- helpers ---

    def _matching(self, record_set: str, predicates: dict[str, Any]):
        self._fields_of(record_set)
        self._check_fields(record_set, predicates)
        for record in self._records[record_set]:
            if all(record.get(field) == value for field, value in predicates.items()):
                yield record

    def _fields_of(self, record_set: str) -> tuple[str, ...]:
        if (fields := self._fields.get(record_set)) is None:
            raise UnknownRecordSetError(record_set)
        return fields

    def _check_fields(self, record_set: str, values: Mapping[str, Any]) -> None:
        fields = self._fields[record_set]
        for field in values:
            if field not in fields:
                raise UnknownFieldError(record_set, field)
