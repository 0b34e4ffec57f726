"""End-to-end tests for a maintenance run against the SQL store."""

from __future__ import annotations

import pytest

from app import create_app
from config import Config
from maintenance.runner import run_reconciliation
from models.user import User
from store.errors import ConnectivityError, PersistenceError
from store.sql_store import SQLAlchemyUserStore


class _FailingUpdateStore(SQLAlchemyUserStore):
    """Fail the update for one record id."""

    def __init__(self, failing_id: int):
        super().__init__()
        self.failing_id = failing_id

    def update_partial(self, record_id, fields):
        if record_id == self.failing_id:
            raise PersistenceError("disk full", record_id=record_id)
        return super().update_partial(record_id, fields)


class _FailingCreateStore(SQLAlchemyUserStore):
    def create(self, fields):
        raise PersistenceError("insert rejected")


def test_legacy_student_and_missing_faculty(store, make_user):
    make_user("A", "a@x.com")

    report = run_reconciliation(store)

    student = store.find_one(email="a@x.com")
    assert student.is_verified is False
    assert student.verification_status == "pending"
    assert len(report.updated) == 1
    assert report.updated[0].updates == {
        "is_verified": False,
        "verification_status": "pending",
    }

    assert report.bootstrap.created is True
    faculty = store.find(role="faculty")
    assert len(faculty) == 1
    assert faculty[0].is_verified is True
    assert faculty[0].verification_status == "approved"


def test_compliant_store_is_left_alone(store, make_user):
    make_user("A", "a@x.com", is_verified=False, verification_status="pending")
    make_user("Prof", "prof@x.com", role="faculty", is_verified=True, verification_status="approved")

    report = run_reconciliation(store)

    assert report.scanned == 1
    assert report.updated == []
    assert report.bootstrap.created is False
    assert User.query.count() == 2


def test_approved_student_only_gets_flag(store, make_user):
    make_user("A", "a@x.com", verification_status="approved")

    report = run_reconciliation(store)

    assert report.outcomes[0].updates == {"is_verified": False}
    student = store.find_one(email="a@x.com")
    assert student.verification_status == "approved"
    assert student.is_verified is False


def test_second_run_changes_nothing(store, make_user):
    make_user("A", "a@x.com")
    make_user("B", "b@x.com", is_verified=True)

    run_reconciliation(store)
    report = run_reconciliation(store)

    assert report.updated == []
    assert report.bootstrap.created is False
    assert len(store.find(role="faculty")) == 1


def test_other_roles_are_not_reconciled(store, make_user):
    make_user("Acme", "hr@acme.com", role="company")

    run_reconciliation(store)

    company = store.find_one(email="hr@acme.com")
    assert company.is_verified is None
    assert company.verification_status is None


def test_snapshot_reflects_repaired_students(store, make_user):
    make_user("A", "a@x.com")

    report = run_reconciliation(store)

    assert [(user.email, user.verification_status, user.is_verified) for user in report.snapshot] == [
        ("a@x.com", "pending", False)
    ]


def test_dry_run_writes_nothing(store, make_user):
    make_user("A", "a@x.com")

    report = run_reconciliation(store, dry_run=True)

    assert len(report.pending_updates) == 1
    assert report.updated == []
    assert report.bootstrap.planned is not None
    assert store.find(role="faculty") == []
    assert store.find_one(email="a@x.com").is_verified is None


def test_update_failure_keeps_earlier_updates(app, make_user):
    first = make_user("A", "a@x.com")
    second = make_user("B", "b@x.com")
    first_id, second_id = first.id, second.id

    with pytest.raises(PersistenceError) as excinfo:
        run_reconciliation(_FailingUpdateStore(failing_id=second_id))

    assert excinfo.value.record_id == second_id
    store = SQLAlchemyUserStore()
    assert store.find_one(id=first_id).verification_status == "pending"
    assert store.find_one(id=second_id).verification_status is None
    assert store.find(role="faculty") == []

    report = run_reconciliation(store)

    assert [outcome.record_id for outcome in report.updated] == [second_id]
    assert report.bootstrap.created is True


def test_create_failure_is_fatal(app, make_user):
    make_user("A", "a@x.com")

    with pytest.raises(PersistenceError):
        run_reconciliation(_FailingCreateStore())


def test_unreachable_store_fails_before_any_work(tmp_path):
    class UnreachableConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'missing' / 'portal.db'}"

    application = create_app(UnreachableConfig)

    with application.app_context():
        with pytest.raises(ConnectivityError):
            run_reconciliation(SQLAlchemyUserStore())

    assert not (tmp_path / "missing").exists()
