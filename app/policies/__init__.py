"""
Authorization policies, looked up by record class
"""
from app.models.sample_item import SampleItem
from app.policies.application_policy import ApplicationPolicy, authorize
from app.policies.sample_item_policy import SampleItemPolicy

POLICIES = {
    SampleItem: SampleItemPolicy,
}


def policy_for(record) -> type:
    """Policy class for a record instance or model class"""
    model = record if isinstance(record, type) else type(record)
    return POLICIES.get(model, ApplicationPolicy)


__all__ = ["ApplicationPolicy", "SampleItemPolicy", "authorize", "policy_for"]
