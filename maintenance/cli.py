"""Command line entry points for verification maintenance."""

from __future__ import annotations

import sys

import click
from flask import current_app
from flask.cli import with_appcontext

from store.errors import StoreError
from store.sql_store import SQLAlchemyUserStore

from .report import render_report
from .runner import run_reconciliation


def execute(dry_run: bool = False) -> int:
    """Run the maintenance job in the current app context; return an exit status."""

    store = SQLAlchemyUserStore()
    try:
        report = run_reconciliation(store, dry_run=dry_run)
    except StoreError as exc:
        current_app.logger.exception("Verification maintenance failed")
        click.echo(f"Error: {exc}", err=True)
        return 1

    for line in render_report(report):
        click.echo(line)
    return 0


@click.command("fix-students")
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Show what would change without writing to the database.",
)
@with_appcontext
def fix_students_command(dry_run: bool) -> None:
    """Repair student verification fields and ensure a faculty user exists."""

    sys.exit(execute(dry_run=dry_run))
