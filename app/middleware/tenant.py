"""
Tenant resolution middleware

Runs before every handler: resolves the tenant from the leftmost subdomain
of the Host header and stores it in the request context. Unknown subdomains
are answered with a not-found response without reaching any handler. The
context is cleared however the request ends.
"""
import logging
import uuid
from typing import Callable, Optional

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.responses import not_found_response
from app.core import database
from app.core.context import request_context
from app.services.tenant_service import ResolutionStatus, TenantResolution, resolve_tenant

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class TenantMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, session_factory: Optional[Callable] = None):
        super().__init__(app)
        self._session_factory = session_factory

    def _resolve(self, host: Optional[str]) -> TenantResolution:
        factory = self._session_factory or database.SessionLocal
        db = factory()
        try:
            return resolve_tenant(db, host)
        finally:
            db.close()

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        with request_context(request_id) as ctx:
            host = request.headers.get("host")
            resolution = await run_in_threadpool(self._resolve, host)

            if resolution.status is ResolutionStatus.NOT_FOUND:
                logger.info(f"Unknown tenant subdomain '{resolution.subdomain}' ({request_id})")
                response = not_found_response(request)
            else:
                if resolution.status is ResolutionStatus.RESOLVED:
                    ctx.set_tenant(resolution.tenant)
                    logger.debug(f"Resolved tenant {resolution.tenant.subdomain} ({request_id})")
                request.state.request_context = ctx
                response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
