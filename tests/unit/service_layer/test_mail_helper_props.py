"""Hypothesis property tests for MailHelper recipient sanitization.

Properties checked over generated recipient lists:

- **Order and arity**: one output item per input recipient, in input order,
  when no recipient contains a comma.
- **Only the address changes**: each output item is either the input
  unchanged or the input with the modifier inserted after its address.
- **Idempotence**: sanitizing an already-sanitized list changes nothing.
- **Nothing escapes**: with no whitelist and no exempt groups, every output
  address carries the modifier.

Display names are drawn without ``@`` so an address never occurs inside
its own display name.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from instancekit.domain.recipients import EMAIL_MODIFIER, extract_email_address
from instancekit.service_layer import MailHelper

from .fakes import FakeUserDirectory

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Strategies
# ============================================================================

_label = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=8)

addresses = st.builds(lambda local, domain: f"{local}@{domain}.com", _label, _label)

display_names = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz .'", max_size=12
)

recipients = st.one_of(
    addresses,
    st.builds(lambda name, addr: f"{name} <{addr}>", display_names, addresses),
)

recipient_lists = st.lists(recipients, min_size=1, max_size=6)


def helper_with(whitelisted: list[str], exempt: list[str]) -> MailHelper:
    """A helper whitelisting `whitelisted` and exempting users at `exempt`."""
    directory = FakeUserDirectory(
        users={addr: f"usr-{i}" for i, addr in enumerate(exempt)},
        memberships={f"usr-{i}": {"grp-exempt"} for i in range(len(exempt))},
    )
    return MailHelper(
        directory,
        receiving_addresses=";".join(whitelisted),
        receiving_group_ids="grp-exempt",
    )


# ============================================================================
#                               Properties
# ============================================================================


@given(items=recipient_lists, whitelisted=st.lists(addresses, max_size=3))
def test_one_output_per_recipient_in_order(items, whitelisted):
    """Output items line up one-to-one with the input recipients."""
    out = helper_with(whitelisted, []).add_test_to_addresses(items).split(",")
    assert len(out) == len(items)
    for before, after in zip(items, out):
        address = extract_email_address(before)
        assert after in (
            before,
            before.replace(address, address + EMAIL_MODIFIER, 1),
        )


@given(
    items=recipient_lists,
    whitelisted=st.lists(addresses, max_size=3),
    exempt=st.lists(addresses, max_size=3),
)
def test_sanitizing_twice_changes_nothing(items, whitelisted, exempt):
    """A second pass over sanitized output leaves it as is."""
    helper = helper_with(whitelisted, exempt)
    once = helper.add_test_to_addresses(items)
    assert helper.add_test_to_addresses(once.split(",")) == once


@given(items=recipient_lists)
def test_every_address_modified_without_exemptions(items):
    """With nothing exempt, no output address lacks the modifier."""
    helper = MailHelper(FakeUserDirectory())
    for item in helper.add_test_to_addresses(items).split(","):
        assert extract_email_address(item).endswith(EMAIL_MODIFIER)


@given(items=recipient_lists)
def test_whitelisting_every_address_changes_nothing(items):
    """Recipients whose addresses are all whitelisted pass through untouched."""
    whitelisted = [extract_email_address(item).upper() for item in items]
    helper = helper_with(whitelisted, [])
    assert helper.add_test_to_addresses(items) == ",".join(items)
