"""Sanitize outbound email recipients for non-production environments.

Every recipient gets ``.test`` appended to its address unless one of these
applies, checked in this order:

1. the address already carries the ``.test`` modifier;
2. the address appears in the configured whitelist (case-insensitive);
3. the address belongs to a directory user who is a member of one of the
   configured exempt groups.

The processed recipients are joined with a comma, in their original order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from instancekit import config
from instancekit.domain import recipients as rules

if TYPE_CHECKING:
    from instancekit.interfaces.directory import UserDirectory
    from instancekit.interfaces.properties import PropertySource

logger = logging.getLogger(__name__)


class MailHelper:
    """Rewrite recipient addresses so sub-production mail cannot be delivered.

    Args:
        directory: User directory used for the exempt-group check.
        receiving_addresses: Raw whitelist string. Lowercased once here.
        receiving_group_ids: Raw comma-separated exempt group ids.
    """

    email_modifier = rules.EMAIL_MODIFIER

    def __init__(
        self,
        directory: UserDirectory,
        receiving_addresses: str | None = None,
        receiving_group_ids: str | None = None,
    ) -> None:
        self._directory = directory
        self.receiving_addresses = rules.normalize_whitelist(receiving_addresses)
        self.receiving_group_ids = rules.parse_group_ids(receiving_group_ids)

    @classmethod
    def from_properties(
        cls, directory: UserDirectory, properties: PropertySource
    ) -> MailHelper:
        """Build a helper from the whitelist and group-id system properties."""
        return cls(
            directory,
            receiving_addresses=properties.get_property(
                config.RECEIVING_ADDRESSES_PROPERTY
            ),
            receiving_group_ids=properties.get_property(
                config.RECEIVING_GROUP_IDS_PROPERTY
            ),
        )

    def add_test_to_addresses(self, recipients: Sequence[str] | None) -> str:
        """Sanitize `recipients` and join them into one comma-separated string.

        Args:
            recipients: Raw recipient strings, bare or display-name wrapped.

        Returns:
            str: The processed recipients joined by ``,``; ``""`` when
            `recipients` is None or empty.
        """
        if not recipients:
            return ""
        return rules.join_recipients(
            [self._process_recipient(recipient) for recipient in recipients]
        )

    def modify_recipient(self, recipient: str, extracted: str | None = None) -> str:
        """Append the modifier to `recipient`'s address part.

        See `instancekit.domain.recipients.modify_recipient`.
        """
        return rules.modify_recipient(recipient, extracted)

    def _process_recipient(self, recipient: str) -> str:
        address = rules.extract_email_address(recipient)

        if self._should_skip_modification(address):
            return recipient

        if self._is_user_in_authorized_group(address):
            logger.debug("Leaving %s unchanged: exempt group member", address)
            return recipient

        return self.modify_recipient(recipient, address)

    def _should_skip_modification(self, address: str) -> bool:
        if rules.is_already_modified(address):
            logger.debug("Leaving %s unchanged: already modified", address)
            return True
        if rules.is_whitelisted(address, self.receiving_addresses):
            logger.debug("Leaving %s unchanged: whitelisted", address)
            return True
        return False

    def _is_user_in_authorized_group(self, address: str) -> bool:
        if (found := self._directory.find_user_by_email(address)) is None:
            return False

        if (user := self._directory.get_user_by_id(found.sys_id)) is None:
            return False

        return any(
            self._directory.is_member_of(user, group_id)
            for group_id in self.receiving_group_ids
        )
