"""
League table endpoints.

Rows are listed by table position.  Deleting a row removes it; the
remaining rows keep their positions until an administrator edits them.
"""

from typing import List

from fastapi import APIRouter, Depends

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.standing import StandingCreate, StandingRead, StandingUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[StandingRead])
async def list_standings(storage: ClubStorage = Depends(get_storage)) -> List[StandingRead]:
    return storage.standings.list()


add_item_routes(
    router,
    entity="Standing",
    repository=lambda storage: storage.standings,
    read_schema=StandingRead,
    create_schema=StandingCreate,
    update_schema=StandingUpdate,
)
