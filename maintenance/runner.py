"""Orchestrate a single verification maintenance run."""

from __future__ import annotations

from dataclasses import dataclass, field

from flask import current_app

from models.user import User
from store.abstract_store import AbstractUserStore

from .bootstrapper import BootstrapOutcome, ensure_role_exists
from .reconciler import RecordOutcome, reconcile_records
from .scanner import scan_role

RECONCILED_ROLE = "student"
REQUIRED_ROLE = "faculty"


@dataclass
class ReconciliationReport:
    """Everything a run did, for printing and for tests."""

    outcomes: list[RecordOutcome]
    bootstrap: BootstrapOutcome
    snapshot: list[User] = field(default_factory=list)
    dry_run: bool = False

    @property
    def scanned(self) -> int:
        return len(self.outcomes)

    @property
    def updated(self) -> list[RecordOutcome]:
        return [outcome for outcome in self.outcomes if outcome.updated]

    @property
    def pending_updates(self) -> list[RecordOutcome]:
        return [outcome for outcome in self.outcomes if outcome.updates]


def run_reconciliation(
    store: AbstractUserStore, *, dry_run: bool = False
) -> ReconciliationReport:
    """Repair student verification fields, then make sure faculty exists.

    Any ``StoreError`` propagates; updates committed before the failure stay
    applied and a re-run skips them.
    """

    logger = current_app.logger
    store.ping()

    students = scan_role(store, RECONCILED_ROLE)
    logger.info("Found %d %s users", len(students), RECONCILED_ROLE)
    outcomes = reconcile_records(store, students, dry_run=dry_run)

    snapshot = scan_role(store, RECONCILED_ROLE)
    bootstrap = ensure_role_exists(store, REQUIRED_ROLE, dry_run=dry_run)

    return ReconciliationReport(
        outcomes=outcomes,
        bootstrap=bootstrap,
        snapshot=snapshot,
        dry_run=dry_run,
    )
