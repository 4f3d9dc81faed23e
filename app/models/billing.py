"""
Billing customer and subscription records

Mirrors the payment processor's customers and subscriptions; the processor
integration itself lives outside this service.
"""
from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Index, Integer, JSON, String, Uuid
)
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.base import TimestampMixin


class PayCustomer(Base, TimestampMixin):
    __tablename__ = "pay_customers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Polymorphic owner (e.g. "User" + user id)
    owner_type = Column(String(100), nullable=False)
    owner_id = Column(Uuid(as_uuid=True), nullable=False)

    processor = Column(String(50), nullable=False)
    processor_id = Column(String(255), nullable=True)
    default = Column(Boolean, default=True)
    data = Column(JSON, nullable=True)

    subscriptions = relationship(
        "PaySubscription", back_populates="customer", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_pay_customers_owner", "owner_type", "owner_id"),
        Index("ix_pay_customers_processor", "processor", "processor_id"),
    )

    def __repr__(self):
        return f"<PayCustomer {self.owner_type}:{self.owner_id} ({self.processor})>"


class PaySubscription(Base, TimestampMixin):
    __tablename__ = "pay_subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(
        Integer, ForeignKey("pay_customers.id"), nullable=False, index=True
    )

    name = Column(String(255), nullable=False)
    processor = Column(String(50), nullable=False)
    processor_id = Column(String(255), nullable=True)
    processor_plan = Column(String(255), nullable=True)
    quantity = Column(Integer, default=1)
    trial_ends_at = Column(DateTime, nullable=True)
    ends_at = Column(DateTime, nullable=True)
    data = Column(JSON, nullable=True)

    customer = relationship("PayCustomer", back_populates="subscriptions")

    __table_args__ = (
        Index("ix_pay_subscriptions_processor", "processor", "processor_id"),
    )

    def __repr__(self):
        return f"<PaySubscription {self.name} - {self.processor_plan}>"
