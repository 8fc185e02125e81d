"""Wake-on-LAN routes — configured target and manual wake."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from wakegate.api.deps import require_wake_trigger
from wakegate.schemas.wol import WolResponse, WolTargetResponse
from wakegate.services.wake_trigger import WakeTrigger

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/target", response_model=WolTargetResponse)
async def wol_target(trigger: WakeTrigger = Depends(require_wake_trigger)):
    """Show the configured WoL target."""
    t = trigger.target
    return WolTargetResponse(
        mac=t.mac,
        host=t.host,
        port=t.port,
        effective_port=t.effective_port,
    )


@router.post("", response_model=WolResponse)
async def wake_on_lan(trigger: WakeTrigger = Depends(require_wake_trigger)):
    """Send a WoL packet now. Send failures are reported, not raised."""
    result = await run_in_threadpool(trigger.fire)
    return WolResponse(
        sent=result.ok,
        target=result.target,
        error=str(result.error) if result.error else None,
    )
