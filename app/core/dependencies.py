from fastapi import Depends, Request

from app.core.context import RequestContext, current_context
from app.core.exceptions import RouteNotMatched, TenantNotFound
from app.core.subdomain import subdomain_required
from app.models.tenant import Tenant


# -------------------------
# REQUEST CONTEXT
# -------------------------
def get_request_context(request: Request) -> RequestContext:
    """Context opened for this request by TenantMiddleware"""
    ctx = getattr(request.state, "request_context", None)
    return ctx if ctx is not None else current_context()


# -------------------------
# TENANT DEPENDENCIES
# -------------------------
def tenant_route_constraint(request: Request) -> None:
    """
    Route-level gate for tenant-scoped routers

    Raises:
        RouteNotMatched: apex host or reserved subdomain
    """
    if not subdomain_required(request.headers.get("host")):
        raise RouteNotMatched()


def require_current_tenant(
    ctx: RequestContext = Depends(get_request_context)
) -> Tenant:
    """
    Tenant resolved for this request

    Raises:
        TenantNotFound: the handler needs a tenant but none was resolved
    """
    if ctx.tenant is None:
        raise TenantNotFound()
    return ctx.tenant
