"""SQLAlchemy-backed user store implementation."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.user import ROLES, VERIFICATION_STATUSES, User

from .abstract_store import AbstractUserStore
from .errors import ConnectivityError, PersistenceError, QueryError


class SQLAlchemyUserStore(AbstractUserStore):
    """Read and write ``users`` rows through the Flask-SQLAlchemy session.

    Must be used inside an application context. Every write is committed on
    its own; a failed write rolls back only that write.
    """

    def __init__(self, session=None):
        self.session = session or db.session

    def ping(self) -> None:
        try:
            self.session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise ConnectivityError(f"Cannot reach the user store: {exc}") from exc

    def find(self, **predicate: Any) -> list[User]:
        try:
            return self.session.query(User).filter_by(**predicate).order_by(User.id).all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise QueryError(f"Query {predicate!r} failed: {exc}") from exc

    def find_one(self, **predicate: Any) -> User | None:
        try:
            return (
                self.session.query(User)
                .filter_by(**predicate)
                .order_by(User.id)
                .first()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise QueryError(f"Lookup {predicate!r} failed: {exc}") from exc

    def update_partial(self, record_id: int, fields: Mapping[str, Any]) -> User:
        _check_fields(fields)
        try:
            user = self.session.get(User, record_id)
            if user is None:
                raise PersistenceError(
                    f"User {record_id} does not exist.", record_id=record_id
                )
            for key, value in fields.items():
                setattr(user, key, value)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(
                f"Updating user {record_id} failed: {exc}", record_id=record_id
            ) from exc
        return user

    def create(self, fields: Mapping[str, Any]) -> User:
        _check_fields(fields)
        user = User(**fields)
        try:
            self.session.add(user)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(
                f"Creating user {fields.get('email')!r} failed: {exc}"
            ) from exc
        return user


def _check_fields(fields: Mapping[str, Any]) -> None:
    unknown = sorted(set(fields) - set(User.__table__.columns.keys()))
    if unknown:
        raise ValueError("Unknown user fields: {}.".format(", ".join(unknown)))
    if "role" in fields and fields["role"] not in ROLES:
        raise ValueError(
            "Role must be one of: {}.".format(", ".join(ROLES))
        )
    status = fields.get("verification_status")
    if "verification_status" in fields and status not in VERIFICATION_STATUSES:
        raise ValueError(
            "Verification status must be one of: {}.".format(
                ", ".join(VERIFICATION_STATUSES)
            )
        )
