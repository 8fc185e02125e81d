"""Wake trigger — fires a best-effort magic packet at one configured target."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wakegate.schemas.wol import WakeTarget
from wakegate.utils.wol import WolResult, format_target, resolve_target, send_wol

if TYPE_CHECKING:
    from wakegate.config import Settings

logger = logging.getLogger(__name__)


class WakeTrigger:
    """Sends a WoL packet per event; failures are logged and returned, never raised."""

    def __init__(self, target: WakeTarget, dry_run: bool = False):
        self._target = target
        self._dry_run = dry_run

    @classmethod
    def from_settings(cls, settings: Settings) -> WakeTrigger | None:
        """Build a trigger from settings, or None if no MAC is configured."""
        if not settings.wol_enabled:
            return None
        target = WakeTarget(
            mac=settings.wol_mac,
            host=settings.wol_host,
            port=settings.wol_port,
        )
        return cls(target, dry_run=settings.is_dev_mode)

    @property
    def target(self) -> WakeTarget:
        return self._target

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def fire(self) -> WolResult:
        """Send one magic packet. Callers may ignore the result."""
        t = self._target
        if self._dry_run:
            target = format_target(t.host, t.effective_port)
            logger.info("[DEV] WoL packet (not sent): %s -> %s", t.mac, target)
            return WolResult(ok=True, target=target)

        result = send_wol(t.mac, t.host, t.port)
        if result.ok:
            logger.info("WoL packet sent: %s -> %s", t.mac, result.target)
        else:
            logger.warning("WoL send failed for %s: %s", t.mac, result.error)
        return result

    def preflight(self) -> None:
        """Dry-run resolve of the target; raises ResolutionError on failure."""
        t = self._target
        resolve_target(t.host, t.effective_port)
        logger.info("WoL target resolvable: %s", format_target(t.host, t.effective_port))
