"""Pure rules for parsing and rewriting outbound email recipients.

A recipient is either a bare address (``user@domain``) or a display-name
wrapped one (``"Display Name" <user@domain>``). Rewriting appends
`EMAIL_MODIFIER` to the address part only, so mail to a sanitized address
cannot reach a real mailbox.

Nothing here validates addresses: a string without ``<...>`` is taken whole
as the address, however malformed.
"""

from __future__ import annotations

import re

EMAIL_MODIFIER = ".test"
EMAIL_PATTERN = re.compile(r"<([^>]*)>", re.IGNORECASE)
GROUP_ID_SEPARATOR = ","
RECIPIENT_SEPARATOR = ","


def extract_email_address(recipient: str) -> str:
    """Return the bracketed address of a wrapped recipient, else the whole string.

    Examples:
        >>> extract_email_address('"John Doe" <john@x.com>')
        'john@x.com'
        >>> extract_email_address("john@x.com")
        'john@x.com'
    """
    if match := EMAIL_PATTERN.search(recipient):
        return match.group(1)
    return recipient


def is_already_modified(address: str) -> bool:
    """True if the modifier already appears anywhere in `address`."""
    return EMAIL_MODIFIER in address


def normalize_whitelist(raw: str | None) -> str:
    """Lowercase the configured whitelist; None/empty becomes ``""``."""
    return raw.lower() if raw else ""


def is_whitelisted(address: str, whitelist: str) -> bool:
    """Check `address` against the normalized whitelist string.

    This is substring containment, not set membership: with ``bob@x.com``
    whitelisted, ``acme-bob@x.com`` is *not* matched but ``bob@x.co`` is.
    Any address that occurs inside the whitelist text counts.

    Note the direction: the address is searched for inside the whitelist,
    never a whitelist entry inside the address. Reading it the other way
    round would exempt ``acme-bob@x.com``; it does not. See "Whitelist
    direction" in DESIGN.md.
    """
    return address.lower() in whitelist


def parse_group_ids(raw: str | None) -> list[str]:
    """Split the configured exempt group ids on commas.

    Items are kept verbatim (no trimming, no de-duplication). None or an
    empty string yields no groups.
    """
    return raw.split(GROUP_ID_SEPARATOR) if raw else []


def modify_recipient(recipient: str, extracted: str | None = None) -> str:
    """Append the modifier to the address part of `recipient`.

    Args:
        recipient: The original recipient string.
        extracted: The address previously extracted from `recipient`. When
            given, its first occurrence inside `recipient` is replaced by the
            modified address, leaving any display name untouched. When empty
            or None, the modifier is appended to the whole string.

    Returns:
        str: The rewritten recipient.

    Examples:
        >>> modify_recipient("John Doe <john@x.com>", "john@x.com")
        'John Doe <john@x.com.test>'
        >>> modify_recipient("john@x.com")
        'john@x.com.test'
    """
    if extracted:
        return recipient.replace(extracted, extracted + EMAIL_MODIFIER, 1)
    return recipient + EMAIL_MODIFIER


def join_recipients(recipients: list[str]) -> str:
    """Join processed recipients with a bare comma.

    Commas inside display names are not escaped, so the result is ambiguous
    for downstream parsers when a display name contains one.
    """
    return RECIPIENT_SEPARATOR.join(recipients)
