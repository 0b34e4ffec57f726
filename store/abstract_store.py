"""User store abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from models.user import User


class AbstractUserStore(ABC):
    """Interface for backends holding user records."""

    @abstractmethod
    def ping(self) -> None:
        """Raise ``ConnectivityError`` if the backend cannot be reached."""

    @abstractmethod
    def find(self, **predicate: Any) -> list[User]:
        """Return every record matching the predicate, in insertion order."""

    @abstractmethod
    def find_one(self, **predicate: Any) -> User | None:
        """Return the first record matching the predicate, if any."""

    @abstractmethod
    def update_partial(self, record_id: int, fields: Mapping[str, Any]) -> User:
        """Write only ``fields`` onto an existing record and return it."""

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> User:
        """Persist a new record built from ``fields`` and return it."""
