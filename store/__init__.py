"""User store backends."""

from .abstract_store import AbstractUserStore
from .errors import ConnectivityError, PersistenceError, QueryError, StoreError
from .sql_store import SQLAlchemyUserStore

__all__ = [
    "AbstractUserStore",
    "SQLAlchemyUserStore",
    "StoreError",
    "ConnectivityError",
    "QueryError",
    "PersistenceError",
]
