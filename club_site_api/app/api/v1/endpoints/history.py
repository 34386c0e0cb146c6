"""Club history endpoints.  The timeline is listed oldest year first."""

from typing import List

from fastapi import APIRouter, Depends

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.history import HistoryCreate, HistoryRead, HistoryUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[HistoryRead])
async def list_history(storage: ClubStorage = Depends(get_storage)) -> List[HistoryRead]:
    return storage.history.list()


add_item_routes(
    router,
    entity="History entry",
    repository=lambda storage: storage.history,
    read_schema=HistoryRead,
    create_schema=HistoryCreate,
    update_schema=HistoryUpdate,
)
