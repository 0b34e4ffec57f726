"""Application configuration module."""

import os


class Config:
    """Base configuration for the maintenance application."""

    # Core
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///placement-portal.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Faculty bootstrap defaults
    FACULTY_BOOTSTRAP_NAME = os.getenv("FACULTY_BOOTSTRAP_NAME", "Dr. Sarah Wilson")
    FACULTY_BOOTSTRAP_EMAIL = os.getenv("FACULTY_BOOTSTRAP_EMAIL", "faculty@test.com")
    FACULTY_BOOTSTRAP_DEPARTMENT = os.getenv(
        "FACULTY_BOOTSTRAP_DEPARTMENT", "Computer Science"
    )
