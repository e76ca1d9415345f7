"""INSTANCEKIT Record Store Interface Package"""

from .errors import (
    RecordStoreError,
    UnknownFieldError,
    UnknownRecordSetError,
)
from .record_store import (
    Record,
    RecordStore,
)

__all__ = [
    "Record",
    "RecordStore",
    "RecordStoreError",
    "UnknownFieldError",
    "UnknownRecordSetError",
]
