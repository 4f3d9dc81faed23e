"""
TenantMiddleware: resolution, short-circuit and context cleanup
"""
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from app.api.errors import register_exception_handlers
from app.core.context import RequestContext, current_context
from app.core.dependencies import get_request_context, require_current_tenant
from app.core.exceptions import AccessDenied
from app.middleware.tenant import REQUEST_ID_HEADER, TenantMiddleware
from conftest import JSON_HEADERS, url_for


@pytest.fixture
def calls():
    return []


@pytest.fixture
def context_client(calls):
    context_app = FastAPI()
    context_app.add_middleware(TenantMiddleware)
    register_exception_handlers(context_app)

    @context_app.get("/context")
    def read_context(ctx: RequestContext = Depends(get_request_context)):
        calls.append(ctx)
        return {
            "tenant": ctx.tenant.subdomain if ctx.tenant else None,
            "request_id": ctx.request_id,
        }

    @context_app.get("/async-context")
    async def async_context():
        ctx = current_context()
        calls.append(ctx)
        return {"tenant": ctx.tenant.subdomain if ctx.tenant else None}

    @context_app.get("/deny")
    def deny(ctx: RequestContext = Depends(get_request_context)):
        calls.append(ctx)
        raise AccessDenied()

    def record_context(ctx: RequestContext = Depends(get_request_context)):
        calls.append(ctx)
        return ctx

    @context_app.get("/need-tenant")
    def need_tenant(
        ctx: RequestContext = Depends(record_context),
        tenant=Depends(require_current_tenant),
    ):
        return {"tenant": tenant.subdomain}

    @context_app.get("/explode")
    def explode(ctx: RequestContext = Depends(get_request_context)):
        calls.append(ctx)
        raise RuntimeError("handler failure")

    return TestClient(context_app, raise_server_exceptions=False)


class TestResolution:
    def test_resolves_tenant(self, context_client, calls, acme):
        """
        Test: Request on acme.lvh.me with tenant acme
        Expected: handler sees acme, context empty afterwards
        """
        response = context_client.get(url_for("/context", "acme"))

        assert response.status_code == 200
        assert response.json()["tenant"] == "acme"
        assert len(calls) == 1
        assert calls[0].tenant is None
        assert calls[0].is_empty
        assert current_context().tenant is None

    def test_resolves_case_insensitively(self, context_client, acme):
        response = context_client.get("http://ACME.lvh.me/context")
        assert response.json()["tenant"] == "acme"

    def test_async_handler_sees_tenant(self, context_client, calls, acme):
        response = context_client.get(url_for("/async-context", "acme"))
        assert response.json() == {"tenant": "acme"}
        assert calls[0].is_empty

    def test_apex_passes_through(self, context_client, calls, acme):
        response = context_client.get(url_for("/context"))
        assert response.status_code == 200
        assert response.json()["tenant"] is None
        assert len(calls) == 1

    def test_unknown_subdomain_short_circuits(self, context_client, calls, acme):
        """
        Test: Request on unknown.lvh.me
        Expected: 404, handler never runs
        """
        response = context_client.get(url_for("/context", "unknown"))

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "404" in response.text
        assert calls == []

    def test_unknown_subdomain_json(self, context_client, calls):
        response = context_client.get(url_for("/context", "nope"), headers=JSON_HEADERS)
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
        assert calls == []

    def test_reserved_subdomain_short_circuits(self, context_client, calls):
        response = context_client.get(url_for("/context", "www"), headers=JSON_HEADERS)
        assert response.status_code == 404
        assert calls == []


class TestCleanup:
    def test_cleared_after_handler_error(self, context_client, calls, acme):
        response = context_client.get(url_for("/explode", "acme"))

        assert response.status_code == 500
        assert len(calls) == 1
        assert calls[0].is_empty

    def test_cleared_after_access_denied(self, context_client, calls, acme):
        """
        Test: Handler raises AccessDenied after the tenant is resolved
        Expected: 403, context emptied
        """
        response = context_client.get(url_for("/deny", "acme"), headers=JSON_HEADERS)

        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}
        assert len(calls) == 1
        assert calls[0].is_empty

    def test_cleared_after_tenant_not_found(self, context_client, calls, acme):
        """
        Test: Tenant-requiring handler reached on the apex host
        Expected: 404 from TenantNotFound, context emptied
        """
        response = context_client.get(url_for("/need-tenant"), headers=JSON_HEADERS)

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
        assert len(calls) == 1
        assert calls[0].is_empty

    def test_tenant_required_handler_runs_with_tenant(self, context_client, calls, acme):
        response = context_client.get(url_for("/need-tenant", "acme"))
        assert response.json() == {"tenant": "acme"}
        assert calls[0].is_empty

    def test_sequential_requests_do_not_leak(self, context_client, calls, acme, beta):
        first = context_client.get(url_for("/context", "acme"))
        second = context_client.get(url_for("/context", "beta"))
        apex = context_client.get(url_for("/context"))

        assert first.json()["tenant"] == "acme"
        assert second.json()["tenant"] == "beta"
        assert apex.json()["tenant"] is None
        assert len({id(ctx) for ctx in calls}) == 3
        assert all(ctx.is_empty for ctx in calls)


class TestRequestId:
    def test_generated_when_missing(self, context_client, acme):
        response = context_client.get(url_for("/context", "acme"))
        request_id = response.headers[REQUEST_ID_HEADER]
        assert request_id
        assert response.json()["request_id"] == request_id

    def test_propagates_incoming(self, context_client, acme):
        response = context_client.get(url_for("/context", "acme"), headers={REQUEST_ID_HEADER: "req-123"})
        assert response.headers[REQUEST_ID_HEADER] == "req-123"
        assert response.json()["request_id"] == "req-123"

    def test_present_on_not_found(self, context_client):
        response = context_client.get(url_for("/context", "ghost"), headers={REQUEST_ID_HEADER: "req-404"})
        assert response.status_code == 404
        assert response.headers[REQUEST_ID_HEADER] == "req-404"
