"""Exceptions for record store operations."""


class RecordStoreError(Exception):
    """Base class for record store errors."""


class UnknownRecordSetError(RecordStoreError):
    """A query named a record set the store does not know.

    Attributes:
        record_set (str): The record set that was requested.
    """

    def __init__(self, record_set: str):
        super().__init__(f"Unknown record set '{record_set}'.")
        self.record_set = record_set


class UnknownFieldError(RecordStoreError):
    """A query predicate named a field the record set does not have.

    Attributes:
        record_set (str): The record set that was queried.
        field (str): The unknown field name.
    """

    def __init__(self, record_set: str, field: str):
        super().__init__(f"Record set '{record_set}' has no field '{field}'.")
        self.record_set = record_set
        self.field = field
