"""PropertySource adapters."""

from .mapping import MappingPropertySource
from .record_store import RecordStorePropertySource

__all__ = ["MappingPropertySource", "RecordStorePropertySource"]
