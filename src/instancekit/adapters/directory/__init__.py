"""UserDirectory adapters."""

from .record_store import RecordStoreUserDirectory

__all__ = ["RecordStoreUserDirectory"]
