"""Interface for the user directory and group membership checks.

The directory answers two questions for the mail sanitizer: "which user owns
this email address?" and "is that user a member of group X?".
"""

from __future__ import annotations

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DirectoryUser:
    """Resolved handle for a directory user.

    Conventions:
      - `sys_id` is the opaque unique identifier of the user record.
      - `email` is stored as found; lookups are exact (case-sensitive) matches.
    """

    sys_id: str
    user_name: str | None = None
    email: str | None = None


class UserDirectory(abc.ABC):
    """Lookup of users by email and of their group memberships."""

    @abc.abstractmethod
    def find_user_by_email(self, email: str) -> DirectoryUser | None:
        """Find the user record whose email exactly equals `email`.

        Args:
            email: The address to look up, compared verbatim.

        Returns:
            DirectoryUser | None: The first matching user, otherwise ``None``.
        """

    @abc.abstractmethod
    def get_user_by_id(self, sys_id: str) -> DirectoryUser | None:
        """Resolve a user handle by its unique identifier.

        Args:
            sys_id: The user's unique identifier.

        Returns:
            DirectoryUser | None: The resolved user, or ``None`` if the
            directory can no longer resolve it (e.g. deactivated).
        """

    @abc.abstractmethod
    def is_member_of(self, user: DirectoryUser, group_id: str) -> bool:
        """Return True if `user` belongs to the group identified by `group_id`."""
