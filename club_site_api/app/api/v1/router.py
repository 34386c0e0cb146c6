"""
Top-level router for version 1 of the API.

Aggregates the entity routers under their collection prefixes.  The
account routes (``/login``, ``/register``, ``/user``) sit at the root
of the API prefix.  When a new entity is added, include its router
here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    players,
    coaches,
    matches,
    news,
    blog_posts,
    media,
    standings,
    contact,
    history,
)

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(players.router, prefix="/players", tags=["players"])
router.include_router(coaches.router, prefix="/coaches", tags=["coaches"])
router.include_router(matches.router, prefix="/matches", tags=["matches"])
router.include_router(news.router, prefix="/news", tags=["news"])
router.include_router(blog_posts.router, prefix="/blog-posts", tags=["blog"])
router.include_router(media.router, prefix="/media", tags=["media"])
router.include_router(standings.router, prefix="/standings", tags=["standings"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(history.router, prefix="/history", tags=["history"])
