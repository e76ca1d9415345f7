"""Instance-scoped configuration lookup with fallback to global defaults."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from instancekit.interfaces.record_store import Record, RecordStore

logger = logging.getLogger(__name__)

INSTANCES = "instances"
PROPERTIES = "properties"
PROPERTY_OVERRIDES = "property_overrides"


class InstanceConfig:
    """Resolve configuration properties for one platform instance.

    The instance record is looked up once, by name, when the object is
    built. If no instance matches, the resolver still works: `get_name()`
    returns None and only global defaults can be found.

    Args:
        store: Record store holding instances, properties and overrides.
        instance_id: Name of the instance whose overrides apply.

    Example:
        ```py
        config = InstanceConfig(store, "dev355071")
        config.get_key("mail.enabled")
        ```
    """

    def __init__(self, store: RecordStore, instance_id: str | None) -> None:
        self._store = store
        self.instance_id = instance_id
        self.instance: Record | None = store.find_one(INSTANCES, name=instance_id)
        if self.instance is None:
            logger.debug("No instance record named %r", instance_id)

    @property
    def instance_sys_id(self) -> str | None:
        """Unique identifier of the loaded instance record, if any."""
        return self.instance.get("sys_id") if self.instance is not None else None

    def get_name(self) -> str | None:
        """Return the loaded instance's name, or None if none was loaded."""
        return self.instance.get("name") if self.instance is not None else None

    def get_key(self, key: str | None) -> str | None:
        """Return the value of a configuration property.

        The instance-specific override wins; otherwise the property's
        default value is returned. `key` is matched literally, so an empty
        or None key simply finds nothing unless such a row exists.

        Args:
            key: The property key to resolve.

        Returns:
            The resolved value, or None if neither an override nor a default
            exists.
        """
        if (value := self.lookup(key)) is not None:
            return value
        return self.get_default(key)

    def lookup(self, key: str | None) -> str | None:
        """Return the override for `key` on the loaded instance, if any."""
        row = self._store.find_one(
            PROPERTY_OVERRIDES, instance=self.instance_sys_id, key=key
        )
        if row is None:
            return None
        logger.debug("Override found for %r on instance %r", key, self.instance_id)
        return row.get("value")

    def get_default(self, key: str | None) -> str | None:
        """Return the global default value for `key`, if any."""
        row = self._store.find_one(PROPERTIES, key=key)
        if row is None:
            logger.debug("No default for %r", key)
            return None
        return row.get("default_value")
