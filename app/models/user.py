"""
User model
"""
import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import validates

from app.core.database import Base
from app.models.base import TimestampMixin


class User(Base, TimestampMixin):
    """
    Application user

    Registration, confirmation and password recovery flows are handled
    outside this service; only the stored record and its validation live here.
    """

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # member, admin
    role = Column(String(50), nullable=False, default="member")

    confirmed_at = Column(DateTime, nullable=True)

    @validates("email")
    def _normalize_email(self, key, value):
        return (value or "").strip().lower()

    @property
    def is_admin(self):
        return self.role == "admin"

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
