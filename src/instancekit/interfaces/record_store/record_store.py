"""Interface for read-only, equality-predicate queries against named record sets.

The `RecordStore` port is the only way the service layer reaches persisted
rows. It deliberately supports nothing beyond "rows in set X whose fields equal
these values": no ordering, no ranges, no writes, no transactions.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, TypeAlias

Record: TypeAlias = Mapping[str, Any]


class RecordStore(abc.ABC):
    """Equality-predicate lookup over named record sets."""

    @abc.abstractmethod
    def find_one(self, record_set: str, **predicates: Any) -> Record | None:
        """Return the first record matching all predicates.

        Each keyword is a field name and each value the literal it must equal.
        A `None` value matches records whose field is NULL/absent. With several
        matches, which one is returned is unspecified.

        Args:
            record_set: The name of the record set to query.
            **predicates: Field name → required value.

        Returns:
            Record | None: The first matching record, or ``None``.

        Raises:
            UnknownRecordSetError: If `record_set` does not exist.
            UnknownFieldError: If a predicate names a field the set lacks.
        """

    @abc.abstractmethod
    def find_many(self, record_set: str, **predicates: Any) -> list[Record]:
        """Return every record matching all predicates.

        Same matching rules as `find_one`. With no predicates, every record in
        the set is returned.

        Args:
            record_set: The name of the record set to query.
            **predicates: Field name → required value.

        Returns:
            list[Record]: Matching records, possibly empty. Order is unspecified.

        Raises:
            UnknownRecordSetError: If `record_set` does not exist.
            UnknownFieldError: If a predicate names a field the set lacks.
        """
