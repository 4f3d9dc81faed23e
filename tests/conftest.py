"""
Shared fixtures: in-memory database, API client and tenant helpers
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import app.models  # noqa: E402,F401
from app.core.database import Base, SessionLocal, engine  # noqa: E402
from main import app as application  # noqa: E402

BASE_DOMAIN = "lvh.me"
JSON_HEADERS = {"Accept": "application/json"}


def host_for(sub=None):
    """Host for a subdomain of the test domain; apex when sub is None"""
    return f"{sub}.{BASE_DOMAIN}" if sub else BASE_DOMAIN


def url_for(path, sub=None):
    return f"http://{host_for(sub)}{path}"


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(setup_database):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_client():
    """Test client fixture"""
    return TestClient(application)


@pytest.fixture
def acme(db_session):
    from app.services.tenant_service import create_tenant
    return create_tenant(db_session, "acme", "Acme Inc")


@pytest.fixture
def beta(db_session):
    from app.services.tenant_service import create_tenant
    return create_tenant(db_session, "beta", "Beta LLC")
