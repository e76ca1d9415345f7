"""Implementation of RecordStore using SQLAlchemy Core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from instancekit.adapters.db.schema import RECORD_SETS
from instancekit.interfaces.record_store import (
    Record,
    RecordStore,
    UnknownFieldError,
    UnknownRecordSetError,
)

if TYPE_CHECKING:
    from sqlalchemy import Select, Table
    from sqlalchemy.engine import Connection


class SqlAlchemyRecordStore(RecordStore):
    """RecordStore reading the INSTANCEKIT tables through one Connection.

    The store never commits or begins transactions itself; the caller owns
    the connection's lifecycle. Driver errors propagate unchanged.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_one(self, record_set: str, **predicates: Any) -> Record | None:
        stmt = self._select(record_set, predicates).limit(1)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return dict(row._mapping)  # pylint: disable=protected-access

    def find_many(self, record_set: str, **predicates: Any) -> list[Record]:
        stmt = self._select(record_set, predicates)
        return [dict(row._mapping) for row in self.connection.execute(stmt)]  # pylint: disable=protected-access

    # --- statement building ---

    @staticmethod
    def _table(record_set: str) -> Table:
        if (table := RECORD_SETS.get(record_set)) is None:
            raise UnknownRecordSetError(record_set)
        return table

    def _select(self, record_set: str, predicates: dict[str, Any]) -> Select:
        table = self._table(record_set)
        clauses = []
        for field, value in predicates.items():
            if field not in table.c:
                raise UnknownFieldError(record_set, field)
            column = table.c[field]
            # `= NULL` never matches in SQL
            clauses.append(column.is_(None) if value is None else column == value)
        stmt = select(table)
        return stmt.where(*clauses) if clauses else stmt
