"""
Translation of tenancy and authorization errors into responses
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.responses import forbidden_response, not_authorized_response, not_found_response
from app.core.context import current_context
from app.core.exceptions import (
    AccessDenied,
    NotAuthorizedError,
    RecordNotFound,
    RouteNotMatched,
    TenantNotFound,
)

logger = logging.getLogger(__name__)


async def access_denied_handler(request: Request, exc: AccessDenied):
    ctx = current_context()
    logger.warning(f"Access denied for tenant {ctx.tenant_id} on {request.url.path}")
    return forbidden_response(request)


async def tenant_not_found_handler(request: Request, exc: TenantNotFound):
    logger.info(f"Tenant required but not resolved on {request.url.path}")
    return not_found_response(request)


async def route_not_matched_handler(request: Request, exc: RouteNotMatched):
    return not_found_response(request)


async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return not_found_response(request)


async def not_authorized_handler(request: Request, exc: NotAuthorizedError):
    logger.info(f"Policy denied: {exc}")
    return not_authorized_response(request)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccessDenied, access_denied_handler)
    app.add_exception_handler(TenantNotFound, tenant_not_found_handler)
    app.add_exception_handler(RouteNotMatched, route_not_matched_handler)
    app.add_exception_handler(RecordNotFound, record_not_found_handler)
    app.add_exception_handler(NotAuthorizedError, not_authorized_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
