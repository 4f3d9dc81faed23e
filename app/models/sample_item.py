"""
SampleItem model, standing in for any tenant-owned record
"""
import uuid
from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship, validates

from app.core.database import Base
from app.models.base import TimestampMixin, TenantMixin


class SampleItem(Base, TimestampMixin, TenantMixin):
    __tablename__ = "sample_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)

    tenant = relationship("Tenant", back_populates="sample_items")

    def __init__(self, **kwargs):
        if kwargs.get("tenant") is None and kwargs.get("tenant_id") is None:
            raise ValueError("SampleItem requires an owning tenant")
        super().__init__(**kwargs)

    @validates("tenant_id")
    def _keep_tenant_id(self, key, value):
        if self.tenant_id is not None and value != self.tenant_id:
            raise ValueError("SampleItem cannot move to another tenant")
        return value

    @validates("tenant")
    def _keep_tenant(self, key, value):
        if self.tenant_id is not None and (value is None or value.id != self.tenant_id):
            raise ValueError("SampleItem cannot move to another tenant")
        return value

    def __repr__(self):
        return f"<SampleItem {self.name} ({self.tenant_id})>"
