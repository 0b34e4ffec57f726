"""Verification maintenance for user records."""

from .bootstrapper import BootstrapOutcome, ensure_role_exists
from .reconciler import RecordOutcome, compute_delta, reconcile_record, reconcile_records
from .report import render_report
from .runner import ReconciliationReport, run_reconciliation
from .scanner import scan_role

__all__ = [
    "BootstrapOutcome",
    "RecordOutcome",
    "ReconciliationReport",
    "compute_delta",
    "ensure_role_exists",
    "reconcile_record",
    "reconcile_records",
    "render_report",
    "run_reconciliation",
    "scan_role",
]
