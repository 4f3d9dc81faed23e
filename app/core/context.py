"""
Request-scoped context

Holds the tenant, user and request id resolved for the request being
processed. The context lives in a ContextVar, so every request (and the
threadpool work it spawns) sees only its own instance. TenantMiddleware opens
one per request and clears it on every exit path.
"""
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class RequestContext:
    tenant: Optional[Any] = None
    user: Optional[Any] = None
    request_id: Optional[str] = None

    @property
    def tenant_id(self):
        return self.tenant.id if self.tenant is not None else None

    def set_tenant(self, tenant) -> None:
        """Populate the tenant; a request resolves at most one tenant"""
        if self.tenant is not None and self.tenant is not tenant:
            raise RuntimeError("tenant already resolved for this request")
        self.tenant = tenant

    def reset(self) -> None:
        self.tenant = None
        self.user = None
        self.request_id = None

    @property
    def is_empty(self) -> bool:
        return self.tenant is None and self.user is None and self.request_id is None


_current: ContextVar[Optional[RequestContext]] = ContextVar("request_context", default=None)


def current_context() -> RequestContext:
    """
    Context of the request being processed

    Outside of a request an empty, detached context is returned, so reads see
    no tenant and writes are discarded.
    """
    ctx = _current.get()
    if ctx is None:
        return RequestContext()
    return ctx


def current_tenant():
    return current_context().tenant


def begin_request(request_id: Optional[str] = None) -> Token:
    return _current.set(RequestContext(request_id=request_id))


def end_request(token: Token) -> None:
    ctx = _current.get()
    if ctx is not None:
        ctx.reset()
    _current.reset(token)


@contextmanager
def request_context(request_id: Optional[str] = None) -> Iterator[RequestContext]:
    """Open a fresh context for one request and clear it however the block exits"""
    token = begin_request(request_id)
    try:
        yield _current.get()
    finally:
        end_request(token)
