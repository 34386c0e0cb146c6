"""
Application state and FastAPI dependencies.

The store and the settings live on ``app.state`` rather than in module
globals: :func:`club_site_api.app.main.create_app` puts them there and
routes read them back through the dependencies below.  A test can
therefore build an application around a fresh :class:`ClubStorage`
without touching any other instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from club_site_api.app.core.config import Settings
from club_site_api.app.core.storage import ClubStorage

logger = logging.getLogger(__name__)


def get_storage(request: Request) -> ClubStorage:
    """FastAPI dependency returning the application's store.

    Usage in routers::

        @router.get("/example")
        async def example(storage: ClubStorage = Depends(get_storage)):
            return storage.players.list()
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialised")
    return storage


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings


@asynccontextmanager
async def lifespan_handler(app: FastAPI):
    """Bootstrap the store on startup and drop all data on shutdown.

    Startup makes sure the configured administrator account exists and,
    when enabled, loads the demo content.
    """
    from club_site_api.app.services.seed_service import seed_demo_data
    from club_site_api.app.services.user_service import UserService

    storage: ClubStorage = app.state.storage
    settings: Settings = app.state.settings

    await UserService.ensure_admin(storage, settings.admin_username, settings.admin_password)
    if settings.seed_demo_data:
        seed_demo_data(storage)

    logger.info(
        "%s starting with %d players, %d matches, %d news items",
        app.title,
        len(storage.players),
        len(storage.matches),
        len(storage.news),
    )

    yield

    logger.info("%s shutting down", app.title)
    storage.clear()
