"""
Billing records for subscription owners

Keeps local copies of the payment processor's customers and subscriptions.
Talking to the processor is left to the processor's own client.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.billing import PayCustomer, PaySubscription
from app.utils.date import is_future

logger = logging.getLogger(__name__)


def _owner_key(owner):
    return type(owner).__name__, owner.id


def get_or_create_customer(db: Session, owner, processor: str, processor_id: Optional[str] = None) -> PayCustomer:
    """Default customer of an owner for a processor, created on first use"""
    owner_type, owner_id = _owner_key(owner)
    customer = db.query(PayCustomer).filter(
        PayCustomer.owner_type == owner_type,
        PayCustomer.owner_id == owner_id,
        PayCustomer.processor == processor,
    ).first()

    if customer is not None:
        return customer

    customer = PayCustomer(
        owner_type=owner_type,
        owner_id=owner_id,
        processor=processor,
        processor_id=processor_id,
        default=True,
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    logger.info(f"Created {processor} billing customer for {owner_type} {owner_id}")
    return customer


def record_subscription(
    db: Session,
    customer: PayCustomer,
    processor_id: Optional[str] = None,
    name: Optional[str] = None,
    plan: Optional[str] = None,
    quantity: int = 1,
    trial_ends_at: Optional[datetime] = None,
    ends_at: Optional[datetime] = None,
    data: Optional[dict] = None,
) -> PaySubscription:
    """Store a subscription reported by the processor"""
    if quantity < 1:
        raise ValueError("Subscription quantity must be at least 1")

    subscription = PaySubscription(
        customer_id=customer.id,
        name=name or settings.BILLING_PRODUCT_NAME,
        processor=customer.processor,
        processor_id=processor_id,
        processor_plan=plan or settings.BILLING_PLAN_NAME,
        quantity=quantity,
        trial_ends_at=trial_ends_at,
        ends_at=ends_at,
        data=data,
    )
    db.add(subscription)
    db.commit()
    db.refresh(subscription)
    return subscription


def is_active(subscription: PaySubscription, now: Optional[datetime] = None) -> bool:
    """Active while not ended (or ending in the future), or still on trial"""
    if subscription.ends_at is None or is_future(subscription.ends_at, now):
        return True
    return is_future(subscription.trial_ends_at, now)


def active_subscription(db: Session, owner, now: Optional[datetime] = None) -> Optional[PaySubscription]:
    owner_type, owner_id = _owner_key(owner)
    subscriptions = (
        db.query(PaySubscription)
        .join(PayCustomer, PaySubscription.customer_id == PayCustomer.id)
        .filter(PayCustomer.owner_type == owner_type, PayCustomer.owner_id == owner_id)
        .order_by(PaySubscription.created_at.desc(), PaySubscription.id.desc())
        .all()
    )
    for subscription in subscriptions:
        if is_active(subscription, now):
            return subscription
    return None


def is_subscribed(db: Session, owner, now: Optional[datetime] = None) -> bool:
    return active_subscription(db, owner, now) is not None
