"""
Tenant directory: lookups, resolution and administrative creation
"""
import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import TenantValidationError
from app.core.subdomain import extract_subdomain, is_reserved, normalize_subdomain
from app.models.tenant import Tenant

logger = logging.getLogger(__name__)


class ResolutionStatus(str, enum.Enum):
    NO_SUBDOMAIN = "no_subdomain"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class TenantResolution:
    status: ResolutionStatus
    subdomain: Optional[str] = None
    tenant: Optional[Tenant] = None


def find_by_subdomain(db: Session, subdomain: str) -> Optional[Tenant]:
    """Case-insensitive exact lookup on the normalized subdomain"""
    normalized = normalize_subdomain(subdomain)
    if not normalized:
        return None
    return db.query(Tenant).filter(func.lower(Tenant.subdomain) == normalized).first()


def resolve_tenant(db: Session, host: Optional[str]) -> TenantResolution:
    """Map a request host to a tenant lookup outcome"""
    sub = extract_subdomain(host)
    if sub is None:
        return TenantResolution(ResolutionStatus.NO_SUBDOMAIN)

    tenant = find_by_subdomain(db, sub)
    if tenant is None:
        return TenantResolution(ResolutionStatus.NOT_FOUND, subdomain=sub)
    return TenantResolution(ResolutionStatus.RESOLVED, subdomain=sub, tenant=tenant)


def validation_errors(db: Session, tenant: Tenant) -> Dict[str, List[str]]:
    # Re-normalize in case the column was written around the ORM validator
    tenant.subdomain = normalize_subdomain(tenant.subdomain)
    errors: Dict[str, List[str]] = {}

    if not tenant.subdomain:
        errors.setdefault("subdomain", []).append("can't be blank")
        return errors

    query = db.query(Tenant.id).filter(func.lower(Tenant.subdomain) == tenant.subdomain)
    if tenant.id is not None:
        query = query.filter(Tenant.id != tenant.id)
    if query.first() is not None:
        errors.setdefault("subdomain", []).append("has already been taken")

    if is_reserved(tenant.subdomain):
        errors.setdefault("subdomain", []).append("is reserved")

    return errors


def validate_tenant(db: Session, tenant: Tenant) -> Tenant:
    errors = validation_errors(db, tenant)
    if errors:
        raise TenantValidationError(errors)
    return tenant


def create_tenant(db: Session, subdomain: str, name: Optional[str] = None) -> Tenant:
    """
    Create a tenant (administrative action)

    Raises:
        TenantValidationError: blank, reserved or already taken subdomain
    """
    tenant = Tenant(subdomain=subdomain, name=name)
    validate_tenant(db, tenant)

    db.add(tenant)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent insert of the same subdomain
        db.rollback()
        raise TenantValidationError({"subdomain": ["has already been taken"]})
    db.refresh(tenant)

    logger.info(f"Created tenant {tenant.subdomain} ({tenant.id})")
    return tenant
