"""ASGI middleware."""

from wakegate.middleware.wake_on_lan import WakeOnLanMiddleware

__all__ = ["WakeOnLanMiddleware"]
