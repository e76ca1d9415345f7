"""PropertySource backed by a plain mapping (tests, env injection)."""

from collections.abc import Mapping

from instancekit.interfaces.properties import PropertySource

# pylint: disable=too-few-public-methods


class MappingPropertySource(PropertySource):
    """Serve properties from a fixed name → value mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get_property(self, name: str) -> str | None:
        return self._values.get(name)
