"""
Base authorization policy

Every action is denied unless a subclass allows it. Scope narrows a query to
the records a user may see; the base scope returns everything.
"""
from typing import Optional

from app.core.exceptions import NotAuthorizedError


class ApplicationPolicy:
    def __init__(self, user, record):
        self.user = user
        self.record = record

    def index(self) -> bool:
        return False

    def show(self) -> bool:
        return False

    def create(self) -> bool:
        return False

    def update(self) -> bool:
        return False

    def destroy(self) -> bool:
        return False

    def allows(self, action: str) -> bool:
        check = getattr(self, action, None)
        if check is None or not callable(check):
            return False
        return bool(check())

    class Scope:
        def __init__(self, user, scope):
            self.user = user
            self.scope = scope

        def resolve(self):
            return self.scope


def authorize(user, record, action: str, policy_class: Optional[type] = None):
    """
    Check an action against the record's policy

    Raises:
        NotAuthorizedError: the policy refused the action
    """
    if policy_class is None:
        from app.policies import policy_for
        policy_class = policy_for(record)

    policy = policy_class(user, record)
    if not policy.allows(action):
        raise NotAuthorizedError(policy=policy_class.__name__, action=action)
    return record
