"""Shared pytest fixtures for the maintenance tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402
from store.sql_store import SQLAlchemyUserStore  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    FACULTY_BOOTSTRAP_NAME = "Dr. Sarah Wilson"
    FACULTY_BOOTSTRAP_EMAIL = "faculty@test.com"
    FACULTY_BOOTSTRAP_DEPARTMENT = "Computer Science"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application backed by an in-memory database."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def store(app: Flask) -> SQLAlchemyUserStore:
    """Return a SQL user store inside an active application context."""

    with app.app_context():
        yield SQLAlchemyUserStore()


@pytest.fixture()
def make_user(store):
    """Insert a user row directly, leaving unspecified verification fields NULL."""

    def _make_user(name: str, email: str, role: str = "student", **fields) -> User:
        user = User(
            name=name,
            email=email,
            role=role,
            password_hash="pbkdf2:sha256:placeholder",
            **fields,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user
