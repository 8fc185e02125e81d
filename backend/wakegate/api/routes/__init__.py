"""API route registration."""

from fastapi import APIRouter

from wakegate.api.routes import health, wol

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(wol.router, prefix="/wol", tags=["wol"])
