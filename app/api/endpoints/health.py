from fastapi import APIRouter, Depends

from app.core.dependencies import require_current_tenant, tenant_route_constraint
from app.models.tenant import Tenant
from app.utils.date import iso8601_utc

router = APIRouter(tags=["Health"])

tenant_router = APIRouter(tags=["Health"], dependencies=[Depends(tenant_route_constraint)])


@router.get("/health")
def health_check():
    """Liveness check, no tenant involved"""
    return {"status": "ok", "timestamp": iso8601_utc()}


@tenant_router.get("/tenant_health")
def tenant_health_check(tenant: Tenant = Depends(require_current_tenant)):
    """Liveness check for a tenant host"""
    return {"status": "ok", "tenant": tenant.subdomain}
