"""Guarantee that a record with a required role exists."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Any, Mapping

from flask import current_app
from werkzeug.security import generate_password_hash

from models.user import User
from store.abstract_store import AbstractUserStore


@dataclass
class BootstrapOutcome:
    """Result of an existence check for one role."""

    role: str
    record: User | None
    created: bool
    planned: dict[str, Any] | None = None


def placeholder_password_hash() -> str:
    """Return a well-formed hash of a random secret nobody keeps."""

    return generate_password_hash(secrets.token_urlsafe(32))


def default_faculty_fields(config: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the fields for a synthesized faculty account.

    Operator-provisioned faculty accounts are usable immediately, so the
    record starts verified and approved.
    """

    config = config if config is not None else current_app.config
    return {
        "name": config.get("FACULTY_BOOTSTRAP_NAME", "Dr. Sarah Wilson"),
        "email": config.get("FACULTY_BOOTSTRAP_EMAIL", "faculty@test.com"),
        "department": config.get("FACULTY_BOOTSTRAP_DEPARTMENT", "Computer Science"),
        "password_hash": placeholder_password_hash(),
        "role": "faculty",
        "is_active": True,
        "is_verified": True,
        "verification_status": "approved",
    }


def ensure_role_exists(
    store: AbstractUserStore,
    role: str = "faculty",
    defaults: Mapping[str, Any] | None = None,
    *,
    dry_run: bool = False,
) -> BootstrapOutcome:
    """Create a default ``role`` record when the store holds none."""

    logger = current_app.logger
    existing = store.find_one(role=role)
    if existing is not None:
        logger.info("%s exists: %s (%s)", role.capitalize(), existing.name, existing.email)
        return BootstrapOutcome(role=role, record=existing, created=False)

    fields = dict(defaults) if defaults is not None else default_faculty_fields()
    if fields.get("role") != role:
        raise ValueError(f"Bootstrap defaults must carry role {role!r}.")

    if dry_run:
        logger.warning("No %s user found; would create %s", role, fields.get("email"))
        return BootstrapOutcome(role=role, record=None, created=False, planned=fields)

    logger.warning("No %s user found; creating %s", role, fields.get("email"))
    record = store.create(fields)
    logger.info("Created %s user %s (%s)", role, record.id, record.email)
    return BootstrapOutcome(role=role, record=record, created=True)
