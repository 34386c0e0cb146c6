"""
Main entrypoint for the club site API.

``create_app`` assembles the FastAPI application: logging, CORS, error
handlers, the versioned routers and the in-memory store.  A module
level ``app`` is built from the environment settings so the service can
be served directly, e.g.::

    uvicorn club_site_api.app.main:app --reload

Tests call ``create_app`` with their own ``Settings`` and
``ClubStorage`` to get an isolated application.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import ClubStorage
from .dependencies import lifespan_handler


def create_app(settings: Optional[Settings] = None, storage: Optional[ClubStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Configuration to use; defaults to the environment-derived
        module settings.
    storage : ClubStorage, optional
        Store to serve from; a fresh empty one is created when omitted.

    Returns
    -------
    FastAPI
        A configured application.  The administrator account and demo
        data are put in place when its lifespan starts.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan_handler,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else ClubStorage()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.project_name,
            "version": settings.api_version,
            "docs": "/docs",
        }

    return app


app = create_app()
