"""Business logic services — singleton registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wakegate.config import Settings
    from wakegate.services.wake_trigger import WakeTrigger

logger = logging.getLogger(__name__)

_initialized = False
_wake_trigger: WakeTrigger | None = None


def init_services(settings: Settings) -> None:
    """Create the service singletons from settings (no network I/O)."""
    global _initialized, _wake_trigger

    from wakegate.services.wake_trigger import WakeTrigger

    _wake_trigger = WakeTrigger.from_settings(settings)
    _initialized = True

    if _wake_trigger is None:
        logger.warning("WoL target not configured (WAKEGATE_WOL_MAC) — trigger disabled")
    else:
        logger.info("WoL trigger initialized for %s", _wake_trigger.target.mac)


def shutdown_services() -> None:
    """Drop service singletons."""
    global _initialized, _wake_trigger
    _wake_trigger = None
    _initialized = False


def wake_trigger_enabled() -> bool:
    return _wake_trigger is not None


def get_wake_trigger() -> WakeTrigger | None:
    """Configured trigger, or None when WoL is disabled."""
    if not _initialized:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _wake_trigger
