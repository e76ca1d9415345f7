"""Unit tests for RecordStoreUserDirectory over the in-memory store."""

import pytest

from instancekit.adapters.directory import RecordStoreUserDirectory
from instancekit.interfaces.directory import DirectoryUser

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def directory(memory_store) -> RecordStoreUserDirectory:
    """Directory over the seeded sample users and memberships."""
    return RecordStoreUserDirectory(memory_store)


def test_find_user_by_email(directory):
    """Users are found by exact email."""
    assert directory.find_user_by_email("bob@example.com") == DirectoryUser(
        sys_id="usr-bob", user_name="bob", email="bob@example.com"
    )


def test_find_user_by_email_is_exact(directory):
    """Email lookups are case-sensitive and unknown addresses find nothing."""
    assert directory.find_user_by_email("BOB@example.com") is None
    assert directory.find_user_by_email("nobody@example.com") is None


def test_get_user_by_id(directory):
    """Active users resolve by id."""
    user = directory.get_user_by_id("usr-carol")
    assert user is not None
    assert user.user_name == "carol"


def test_inactive_user_found_but_not_resolved(directory):
    """An inactive user is found by email but does not resolve by id."""
    found = directory.find_user_by_email("dave@example.com")
    assert found is not None
    assert directory.get_user_by_id(found.sys_id) is None


def test_unknown_id(directory):
    """Unknown ids resolve to None."""
    assert directory.get_user_by_id("usr-nobody") is None


@pytest.mark.parametrize(
    ("sys_id", "group_id", "expected"),
    [
        ("usr-bob", "grp-qa", True),
        ("usr-bob", "grp-admin", False),
        ("usr-carol", "grp-other", True),
        ("usr-erin", "grp-qa", False),
    ],
)
def test_is_member_of(directory, sys_id, group_id, expected):
    """Membership is a lookup of the (user, group) pair."""
    assert directory.is_member_of(DirectoryUser(sys_id=sys_id), group_id) is expected
