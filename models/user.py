"""User model definition."""

from datetime import datetime

from werkzeug.security import check_password_hash

from . import db


ROLES = ("student", "faculty", "company", "admin")
VERIFICATION_STATUSES = ("pending", "approved", "rejected")


class User(db.Model):
    """Represents a placement portal user.

    ``is_verified`` and ``verification_status`` are nullable: legacy rows
    registered before verification existed carry NULL in both.
    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), nullable=False, index=True)
    department = db.Column(db.String(255), nullable=True)
    company_name = db.Column(db.String(255), nullable=True)
    is_active = db.Column(
        db.Boolean,
        nullable=False,
        default=True,
        server_default=db.text("true"),
    )
    is_verified = db.Column(db.Boolean, nullable=True)
    verification_status = db.Column(db.String(32), nullable=True)
    verified_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    verification_date = db.Column(db.DateTime, nullable=True)
    verification_notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
