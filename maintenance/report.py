"""Plain-text rendering of maintenance run results."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from models.user import User

from .bootstrapper import BootstrapOutcome
from .reconciler import RecordOutcome
from .runner import ReconciliationReport

MISSING = "missing"


def format_outcome(outcome: RecordOutcome, dry_run: bool = False) -> str:
    if not outcome.updates:
        return f"Already has verification fields: {outcome.name} ({outcome.email})"
    fields = ", ".join(f"{key}={value!r}" for key, value in sorted(outcome.updates.items()))
    verb = "Would update" if dry_run else "Updated"
    return f"{verb}: {outcome.name} ({outcome.email}) -> {fields}"


def format_user(user: User) -> str:
    status = user.verification_status or MISSING
    return f"- {user.name} ({user.email}) [{user.role}]: {status} | Verified: {user.is_verified}"


def status_counts(users: Iterable[User]) -> dict[str, int]:
    """Count users per verification status; absent statuses count as missing."""

    return dict(Counter(user.verification_status or MISSING for user in users))


def format_bootstrap(outcome: BootstrapOutcome) -> str:
    if outcome.created and outcome.record is not None:
        return f"Created {outcome.role} user: {outcome.record.name} ({outcome.record.email})"
    if outcome.planned is not None:
        return "Would create {} user: {} ({})".format(
            outcome.role, outcome.planned.get("name"), outcome.planned.get("email")
        )
    record = outcome.record
    return f"{outcome.role.capitalize()} exists: {record.name} ({record.email})"


def render_report(report: ReconciliationReport) -> list[str]:
    """Return the console lines summarizing ``report``."""

    lines = [f"Found {report.scanned} students"]
    lines.extend(format_outcome(outcome, report.dry_run) for outcome in report.outcomes)

    lines.append("")
    lines.append("All students:")
    lines.extend(format_user(user) for user in report.snapshot)

    counts = status_counts(report.snapshot)
    if counts:
        lines.append(
            "Status counts: "
            + ", ".join(f"{status}={count}" for status, count in sorted(counts.items()))
        )

    lines.append("")
    lines.append(format_bootstrap(report.bootstrap))

    changed = len(report.pending_updates)
    if report.dry_run:
        lines.append(f"Dry run complete: {changed} students would be updated.")
    else:
        lines.append(f"Fix completed: {changed} students updated.")
    return lines
