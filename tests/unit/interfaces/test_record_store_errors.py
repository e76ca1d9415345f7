"""Unit tests for the record store error types."""

import pytest

from instancekit.interfaces.record_store import (
    RecordStoreError,
    UnknownFieldError,
    UnknownRecordSetError,
)


def test_unknown_record_set():
    """The error names the set and keeps it as an attribute."""
    err = UnknownRecordSetError("widgets")
    assert isinstance(err, RecordStoreError)
    assert err.record_set == "widgets"
    assert str(err) == "Unknown record set 'widgets'."


def test_unknown_field():
    """The error names both the set and the field."""
    err = UnknownFieldError("users", "colour")
    assert isinstance(err, RecordStoreError)
    assert (err.record_set, err.field) == ("users", "colour")
    assert str(err) == "Record set 'users' has no field 'colour'."


@pytest.mark.parametrize(
    "err", [UnknownRecordSetError("x"), UnknownFieldError("x", "y")]
)
def test_catchable_as_base(err):
    """Both errors are caught by the base class."""
    with pytest.raises(RecordStoreError):
        raise err
