"""Collection scanning for maintenance runs."""

from __future__ import annotations

from models.user import ROLES, User
from store.abstract_store import AbstractUserStore


def scan_role(store: AbstractUserStore, role: str) -> list[User]:
    """Return every user with ``role``, fully materialized in insertion order."""

    if role not in ROLES:
        raise ValueError(
            "Role must be one of: {}.".format(", ".join(ROLES))
        )
    return list(store.find(role=role))
