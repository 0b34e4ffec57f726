"""Exceptions raised by user store backends."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for failures talking to the user store."""


class ConnectivityError(StoreError):
    """The store could not be reached or authenticated against."""


class QueryError(StoreError):
    """A scan or lookup against the store failed."""


class PersistenceError(StoreError):
    """An update or create could not be persisted."""

    def __init__(self, message: str, record_id: int | None = None):
        super().__init__(message)
        self.record_id = record_id
