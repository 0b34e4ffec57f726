"""Repair missing verification fields on existing user records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from flask import current_app

from models.user import User
from store.abstract_store import AbstractUserStore

DEFAULT_IS_VERIFIED = False
DEFAULT_VERIFICATION_STATUS = "pending"


@dataclass
class RecordOutcome:
    """What a reconciliation pass did to one record."""

    record_id: int
    name: str
    email: str
    updates: dict[str, Any] = field(default_factory=dict)
    applied: bool = False

    @property
    def updated(self) -> bool:
        return bool(self.updates) and self.applied


def compute_delta(record: User) -> dict[str, Any]:
    """Return the minimal field set that makes ``record`` compliant.

    An explicit ``False`` or ``"pending"`` is already compliant; only a
    missing flag or a missing/empty status is staged.
    """

    updates: dict[str, Any] = {}
    if record.is_verified is None:
        updates["is_verified"] = DEFAULT_IS_VERIFIED
    if not record.verification_status:
        updates["verification_status"] = DEFAULT_VERIFICATION_STATUS
    return updates


def reconcile_record(
    store: AbstractUserStore, record: User, *, dry_run: bool = False
) -> RecordOutcome:
    """Stage and, unless ``dry_run``, persist the delta for one record."""

    outcome = RecordOutcome(
        record_id=record.id,
        name=record.name,
        email=record.email,
        updates=compute_delta(record),
    )
    if outcome.updates and not dry_run:
        store.update_partial(record.id, outcome.updates)
        outcome.applied = True
    return outcome


def reconcile_records(
    store: AbstractUserStore, records: Iterable[User], *, dry_run: bool = False
) -> list[RecordOutcome]:
    """Reconcile ``records`` one after another in iteration order."""

    logger = current_app.logger
    outcomes = []
    for record in records:
        logger.info("Checking user %s (%s)", record.id, record.email)
        outcome = reconcile_record(store, record, dry_run=dry_run)
        if outcome.updated:
            logger.info(
                "Updated user %s: %s", record.id, ", ".join(sorted(outcome.updates))
            )
        elif outcome.updates:
            logger.info(
                "Would update user %s: %s",
                record.id,
                ", ".join(sorted(outcome.updates)),
            )
        outcomes.append(outcome)
    return outcomes
