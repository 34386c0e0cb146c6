"""
Match endpoints.

Besides the full schedule the site needs two views: the next fixtures
for the home page and the latest results.  Both accept ``limit``.
These routes are declared before the item routes so that
``/matches/upcoming`` is not taken for a match id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.match import MatchCreate, MatchRead, MatchStatus, MatchUpdate
from club_site_api.app.services.match_service import MatchService

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[MatchRead])
async def list_matches(
    status: Optional[MatchStatus] = Query(None, description="Filter by match status"),
    storage: ClubStorage = Depends(get_storage),
) -> List[MatchRead]:
    """Return the whole schedule ordered by date, earliest first."""
    if status is None:
        return storage.matches.list()
    return storage.matches.list(where=lambda match: match.status == status)


@router.get("/upcoming", response_model=List[MatchRead])
async def list_upcoming_matches(
    limit: Optional[int] = Query(None, ge=1),
    storage: ClubStorage = Depends(get_storage),
) -> List[MatchRead]:
    """Upcoming fixtures, soonest first."""
    return await MatchService.list_upcoming(storage, limit=limit)


@router.get("/completed", response_model=List[MatchRead])
async def list_completed_matches(
    limit: Optional[int] = Query(None, ge=1),
    storage: ClubStorage = Depends(get_storage),
) -> List[MatchRead]:
    """Played matches, most recent first."""
    return await MatchService.list_completed(storage, limit=limit)


add_item_routes(
    router,
    entity="Match",
    repository=lambda storage: storage.matches,
    read_schema=MatchRead,
    create_schema=MatchCreate,
    update_schema=MatchUpdate,
)
