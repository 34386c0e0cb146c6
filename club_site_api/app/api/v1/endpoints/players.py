"""
Squad endpoints.

The roster is public; adding, editing and removing players is limited
to administrators.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.player import PlayerCreate, PlayerRead, PlayerUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[PlayerRead])
async def list_players(
    position: Optional[str] = Query(None, description="Only players in this position"),
    storage: ClubStorage = Depends(get_storage),
) -> List[PlayerRead]:
    """Return the squad in the order players were added."""
    if position is None:
        return storage.players.list()
    return storage.players.list(where=lambda player: player.position == position)


add_item_routes(
    router,
    entity="Player",
    repository=lambda storage: storage.players,
    read_schema=PlayerRead,
    create_schema=PlayerCreate,
    update_schema=PlayerUpdate,
)
