import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.database import get_db
from app.core.dependencies import get_request_context, require_current_tenant, tenant_route_constraint
from app.core.exceptions import RecordNotFound
from app.core.guards import assert_tenant
from app.core.security import get_optional_user
from app.models.sample_item import SampleItem
from app.models.tenant import Tenant
from app.models.user import User
from app.policies import SampleItemPolicy, authorize
from app.schemas.sample_item import SampleItemCreate, SampleItemListResponse, SampleItemResponse

router = APIRouter(
    prefix="/sample_items",
    tags=["Sample Items"],
    dependencies=[Depends(tenant_route_constraint)],
)


def _to_response(item: SampleItem) -> SampleItemResponse:
    return SampleItemResponse(id=str(item.id), name=item.name, tenant_id=str(item.tenant_id))


def _find_item(db: Session, item_id: str) -> SampleItem:
    """
    Global primary key lookup; callers must guard the result

    Raises:
        RecordNotFound: malformed id or no such item
    """
    try:
        key = uuid.UUID(item_id)
    except ValueError:
        raise RecordNotFound()
    item = db.get(SampleItem, key)
    if item is None:
        raise RecordNotFound()
    return item


@router.get("", response_model=SampleItemListResponse)
def list_sample_items(
    tenant: Tenant = Depends(require_current_tenant),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Items owned by the current tenant"""
    query = SampleItemPolicy.Scope(current_user, db.query(SampleItem)).resolve()
    items = query.filter(SampleItem.tenant_id == tenant.id).order_by(SampleItem.name.asc()).all()
    return SampleItemListResponse(data=[_to_response(item) for item in items])


@router.post("", response_model=SampleItemResponse, status_code=status.HTTP_201_CREATED)
def create_sample_item(
    payload: SampleItemCreate,
    tenant: Tenant = Depends(require_current_tenant),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Create an item owned by the current tenant"""
    authorize(current_user, SampleItem, "create")

    item = SampleItem(tenant_id=tenant.id, name=payload.name)
    db.add(item)
    db.commit()
    db.refresh(item)
    return _to_response(item)


@router.get("/{item_id}", response_model=SampleItemResponse)
def show_sample_item(
    item_id: str,
    tenant: Tenant = Depends(require_current_tenant),
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Fetch by id, then confirm the current tenant owns it"""
    item = assert_tenant(_find_item(db, item_id), ctx)
    return _to_response(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sample_item(
    item_id: str,
    tenant: Tenant = Depends(require_current_tenant),
    ctx: RequestContext = Depends(get_request_context),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Delete an item (tenant admins only)"""
    item = assert_tenant(_find_item(db, item_id), ctx)
    authorize(current_user, item, "destroy")

    db.delete(item)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
