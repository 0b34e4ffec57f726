"""Repair student verification fields and ensure a faculty user exists.

Usage:
    python scripts/fix_students.py [--dry-run]
"""

from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app
from maintenance.cli import execute


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    dry_run = "--dry-run" in args or "-n" in args

    app = create_app()
    with app.app_context():
        return execute(dry_run=dry_run)


if __name__ == "__main__":
    sys.exit(main())
