"""News endpoints.  Articles are listed newest first."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.news import NewsCreate, NewsRead, NewsUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[NewsRead])
async def list_news(
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many articles"),
    storage: ClubStorage = Depends(get_storage),
) -> List[NewsRead]:
    return storage.news.list(limit=limit)


add_item_routes(
    router,
    entity="News item",
    repository=lambda storage: storage.news,
    read_schema=NewsRead,
    create_schema=NewsCreate,
    update_schema=NewsUpdate,
)
