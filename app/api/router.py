from fastapi import APIRouter

from app.api.endpoints import health, sample_items

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(health.tenant_router)
api_router.include_router(sample_items.router)
