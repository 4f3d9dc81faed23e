"""
Tenancy and authorization errors

These are raised at the handler seam and translated into client responses by
the handlers in app/api/errors.py (or by the tenant middleware itself).
"""
from typing import Dict, List, Optional


class TenantNotFound(Exception):
    """A tenant-scoped operation was reached without a resolved tenant"""


class AccessDenied(Exception):
    """The resolved tenant does not own the requested resource"""


class RouteNotMatched(Exception):
    """The request host does not qualify for a tenant-scoped route"""


class RecordNotFound(Exception):
    """No record exists for the requested id"""


class NotAuthorizedError(Exception):
    """A policy refused the action (role based, unrelated to tenancy)"""

    def __init__(self, policy: Optional[str] = None, action: Optional[str] = None):
        self.policy = policy
        self.action = action
        message = "not allowed"
        if policy and action:
            message = f"not allowed to {action} with {policy}"
        super().__init__(message)


class ValidationFailed(Exception):
    """Base for record validation failures, carrying field -> messages"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        details = "; ".join(
            f"{field} {message}" for field, messages in errors.items() for message in messages
        )
        super().__init__(f"Validation failed: {details}")


class TenantValidationError(ValidationFailed):
    pass


class UserValidationError(ValidationFailed):
    pass
