"""
Tenant ownership guard
"""
import enum
from typing import Optional

from app.core.context import RequestContext, current_context
from app.core.exceptions import AccessDenied


class GuardResult(str, enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


def check_tenant_ownership(resource, tenant_id) -> GuardResult:
    """
    Decide whether a record belongs to the given tenant

    Deny when the record is missing, when no tenant is resolved, or when the
    record's tenant_id differs.
    """
    if resource is None or tenant_id is None:
        return GuardResult.DENY
    owner_id = getattr(resource, "tenant_id", None)
    if owner_id is None or owner_id != tenant_id:
        return GuardResult.DENY
    return GuardResult.ALLOW


def assert_tenant(resource, context: Optional[RequestContext] = None):
    """
    Raise AccessDenied unless the current tenant owns the record

    For handlers that fetch a record by primary key outside a tenant-scoped
    query. Returns the record so it can be used inline.
    """
    ctx = context if context is not None else current_context()
    if check_tenant_ownership(resource, ctx.tenant_id) is GuardResult.DENY:
        raise AccessDenied()
    return resource
