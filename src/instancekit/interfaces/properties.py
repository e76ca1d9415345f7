"""Interface for flat key → string configuration values ("system properties")."""

import abc

# pylint: disable=too-few-public-methods


class PropertySource(abc.ABC):
    """Read-only, exact-key lookup of configuration strings."""

    @abc.abstractmethod
    def get_property(self, name: str) -> str | None:
        """Return the value configured for `name`, or None if there is none."""
