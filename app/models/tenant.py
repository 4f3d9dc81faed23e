"""
Tenant model
"""
import uuid
from sqlalchemy import Column, Index, String, Uuid, func
from sqlalchemy.orm import relationship, validates

from app.core.database import Base
from app.core.subdomain import normalize_subdomain
from app.models.base import TimestampMixin


class Tenant(Base, TimestampMixin):
    """
    An isolated customer account, addressed by its subdomain

    The subdomain is normalized (trimmed, lowercased) whenever it is assigned;
    presence, reserved-name and uniqueness checks live in tenant_service.
    """

    __tablename__ = "tenants"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    subdomain = Column(String(63), nullable=False)
    name = Column(String(255), nullable=True)

    sample_items = relationship(
        "SampleItem", back_populates="tenant", cascade="all, delete-orphan"
    )

    @validates("subdomain")
    def _normalize_subdomain(self, key, value):
        return normalize_subdomain(value)

    def __repr__(self):
        return f"<Tenant {self.subdomain}>"


Index("ix_tenants_lower_subdomain", func.lower(Tenant.subdomain), unique=True)
