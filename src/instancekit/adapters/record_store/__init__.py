"""Record store adapters.

- `InMemoryRecordStore`: dict-backed store for tests and prototyping.
- `SqlAlchemyRecordStore`: reads the tables in `instancekit.adapters.db.schema`
  through a SQLAlchemy `Connection`.
"""

from .memory import InMemoryRecordStore
from .sqlalchemy_store import SqlAlchemyRecordStore

__all__ = ["InMemoryRecordStore", "SqlAlchemyRecordStore"]
