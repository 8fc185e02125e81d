"""FastAPI dependency injection — configured wake trigger."""

from __future__ import annotations

from fastapi import HTTPException, status

from wakegate.services import get_wake_trigger
from wakegate.services.wake_trigger import WakeTrigger


def require_wake_trigger() -> WakeTrigger:
    """Return the configured trigger or 404 if WoL is disabled."""
    trigger = get_wake_trigger()
    if trigger is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="WoL target not configured",
        )
    return trigger
