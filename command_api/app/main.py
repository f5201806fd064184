"""
Main entrypoint for the Command API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app; the module-level ``app`` is what ASGI servers load, e.g.::

    uvicorn command_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.command_service import CommandService
from .services.command_store import CommandStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CommandStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[CommandStore]
        Store to serve.  When omitted, a store is opened on
        ``settings.database_url`` at startup and closed at shutdown;
        an injected store is left open for its owner to close.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix=settings.api_prefix)

    if store is not None:
        app.state.command_service = CommandService(store)
        return app

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.command_service = CommandService(CommandStore(settings.database_url))
        logger.info("Serving commands from %s", settings.database_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        service = getattr(app.state, "command_service", None)
        if service is not None:
            service.store.close()

    return app


app = create_app()
