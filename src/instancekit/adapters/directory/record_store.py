"""UserDirectory backed by the `users` and `group_members` record sets.

Works over any RecordStore, so the same adapter serves the SQLAlchemy store
in production and the in-memory store in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from instancekit.interfaces.directory import DirectoryUser, UserDirectory

if TYPE_CHECKING:
    from instancekit.interfaces.record_store import Record, RecordStore

USERS = "users"
GROUP_MEMBERS = "group_members"


class RecordStoreUserDirectory(UserDirectory):
    """Directory lookups expressed as RecordStore equality queries.

    Inactive users (``active`` explicitly false) are found by email but do
    not resolve by id, so they can never qualify for a group exemption.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def find_user_by_email(self, email: str) -> DirectoryUser | None:
        if (row := self._store.find_one(USERS, email=email)) is None:
            return None
        return self._to_user(row)

    def get_user_by_id(self, sys_id: str) -> DirectoryUser | None:
        row = self._store.find_one(USERS, sys_id=sys_id)
        if row is None or row.get("active") is False:
            return None
        return self._to_user(row)

    def is_member_of(self, user: DirectoryUser, group_id: str) -> bool:
        return (
            self._store.find_one(GROUP_MEMBERS, user=user.sys_id, group=group_id)
            is not None
        )

    @staticmethod
    def _to_user(row: Record) -> DirectoryUser:
        return DirectoryUser(
            sys_id=row["sys_id"],
            user_name=row.get("user_name"),
            email=row.get("email"),
        )
