"""Wake-on-LAN trigger middleware.

Sends a magic packet for every matching HTTP request, then hands the request
to the wrapped application unchanged. The send result is discarded: a failed
wake never alters or blocks the response.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from starlette.concurrency import run_in_threadpool
from starlette.types import ASGIApp, Receive, Scope, Send

if TYPE_CHECKING:
    from wakegate.services.wake_trigger import WakeTrigger

logger = logging.getLogger(__name__)


class WakeOnLanMiddleware:
    """Pure ASGI middleware; fires ``trigger`` before the next handler."""

    def __init__(self, app: ASGIApp, trigger: WakeTrigger, paths: Iterable[str] = ()):
        self.app = app
        self.trigger = trigger
        self.paths = tuple(paths)

    def matches(self, path: str) -> bool:
        if not self.paths:
            return True
        return any(path.startswith(prefix) for prefix in self.paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self.matches(scope.get("path", "")):
            # Best-effort; resolve + write block, so keep them off the event loop
            result = await run_in_threadpool(self.trigger.fire)
            logger.debug("WoL trigger on %s: ok=%s", scope.get("path"), result.ok)
        await self.app(scope, receive, send)
