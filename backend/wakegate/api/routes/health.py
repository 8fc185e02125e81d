"""Health check."""

from fastapi import APIRouter

from wakegate import __version__
from wakegate.schemas.system import HealthResponse
from wakegate.services import wake_trigger_enabled

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Lightweight connectivity check."""
    return HealthResponse(version=__version__, wol_enabled=wake_trigger_enabled())


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
