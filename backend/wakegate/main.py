"""wakegate FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from wakegate import __version__
from wakegate.config import Settings, settings
from wakegate.middleware import WakeOnLanMiddleware
from wakegate.services import get_wake_trigger, init_services, shutdown_services

logger = logging.getLogger(__name__)


def _setup_logging(app_settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Application factory."""
    from wakegate.api.routes import api_router

    app_settings = app_settings or settings

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        """Startup / shutdown lifecycle."""
        # === STARTUP ===
        _setup_logging(app_settings)

        trigger = get_wake_trigger()
        if trigger is not None and app_settings.wol_preflight:
            # Fail fast on an unresolvable target
            trigger.preflight()

        logger.info(
            "wakegate v%s started — listening on %s:%s",
            __version__, app_settings.host, app_settings.port,
        )
        try:
            yield
        finally:
            # === SHUTDOWN ===
            shutdown_services()
            logger.info("wakegate shutting down")

    init_services(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        version=__version__,
        debug=app_settings.debug,
        lifespan=_lifespan,
    )

    trigger = get_wake_trigger()
    if trigger is not None:
        app.add_middleware(WakeOnLanMiddleware, trigger=trigger, paths=app_settings.wol_paths)
        logger.info("WoL middleware active (paths: %s)", app_settings.wol_paths or "all")

    app.include_router(api_router, prefix=app_settings.api_prefix)

    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "wakegate.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
