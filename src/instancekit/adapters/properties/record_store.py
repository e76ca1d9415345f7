"""PropertySource reading the `sys_properties` record set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from instancekit.interfaces.properties import PropertySource

if TYPE_CHECKING:
    from instancekit.interfaces.record_store import RecordStore

# pylint: disable=too-few-public-methods

SYS_PROPERTIES = "sys_properties"


class RecordStorePropertySource(PropertySource):
    """Look system properties up by exact name in a RecordStore."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def get_property(self, name: str) -> str | None:
        if (row := self._store.find_one(SYS_PROPERTIES, name=name)) is None:
            return None
        return row.get("value")
