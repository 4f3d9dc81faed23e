"""
SQLAlchemy models for the application
"""
from app.models.base import Base, TimestampMixin, TenantMixin
from app.models.tenant import Tenant
from app.models.sample_item import SampleItem
from app.models.user import User
from app.models.billing import PayCustomer, PaySubscription

__all__ = [
    "Base",
    "TimestampMixin",
    "TenantMixin",
    "Tenant",
    "SampleItem",
    "User",
    "PayCustomer",
    "PaySubscription",
]
