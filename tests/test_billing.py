"""
Billing customer and subscription records
"""
from datetime import datetime, timedelta

import pytest

from app.core.security import hash_password
from app.models.user import User
from app.services.billing_service import (
    active_subscription,
    get_or_create_customer,
    is_active,
    is_subscribed,
    record_subscription,
)

NOW = datetime(2025, 9, 20, 12, 0, 0)


@pytest.fixture
def owner(db_session):
    user = User(email="billing@example.com", password_hash=hash_password("Password123!"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


class TestCustomers:
    def test_created_once_per_processor(self, db_session, owner):
        first = get_or_create_customer(db_session, owner, "stripe", "cus_123")
        again = get_or_create_customer(db_session, owner, "stripe")
        other = get_or_create_customer(db_session, owner, "paddle")

        assert first.id == again.id
        assert first.owner_type == "User"
        assert first.owner_id == owner.id
        assert first.default is True
        assert other.id != first.id


class TestSubscriptions:
    def test_defaults_from_settings(self, db_session, owner):
        customer = get_or_create_customer(db_session, owner, "stripe")
        subscription = record_subscription(db_session, customer, processor_id="sub_1")

        assert subscription.name == "WhisperDesk Subscription"
        assert subscription.processor_plan == "Standard"
        assert subscription.processor == "stripe"
        assert subscription.quantity == 1

    def test_rejects_zero_quantity(self, db_session, owner):
        customer = get_or_create_customer(db_session, owner, "stripe")
        with pytest.raises(ValueError):
            record_subscription(db_session, customer, quantity=0)

    @pytest.mark.parametrize("ends_at, trial_ends_at, expected", [
        (None, None, True),
        (NOW + timedelta(days=3), None, True),
        (NOW - timedelta(days=1), None, False),
        (NOW - timedelta(days=1), NOW + timedelta(days=2), True),
    ])
    def test_is_active(self, db_session, owner, ends_at, trial_ends_at, expected):
        customer = get_or_create_customer(db_session, owner, "stripe")
        subscription = record_subscription(
            db_session, customer, ends_at=ends_at, trial_ends_at=trial_ends_at
        )
        assert is_active(subscription, NOW) is expected

    def test_active_subscription_lookup(self, db_session, owner):
        assert is_subscribed(db_session, owner, NOW) is False

        customer = get_or_create_customer(db_session, owner, "stripe")
        record_subscription(db_session, customer, processor_id="old", ends_at=NOW - timedelta(days=30))
        assert is_subscribed(db_session, owner, NOW) is False

        current = record_subscription(db_session, customer, processor_id="current", plan="Pro")
        found = active_subscription(db_session, owner, NOW)
        assert found.id == current.id
        assert found.processor_plan == "Pro"
