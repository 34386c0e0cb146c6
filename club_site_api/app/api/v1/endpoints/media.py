"""
Gallery endpoints.

The gallery mixes photos and videos; clients pick one kind with the
``type`` query parameter.  Items are listed newest first.  When an
administrator uploads an item without a date it is dated today.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.media import MediaCreate, MediaRead, MediaType, MediaUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[MediaRead])
async def list_media(
    type: Optional[MediaType] = Query(None, description="photo or video"),
    limit: Optional[int] = Query(None, ge=1),
    storage: ClubStorage = Depends(get_storage),
) -> List[MediaRead]:
    if type is None:
        return storage.media.list(limit=limit)
    return storage.media.list(where=lambda item: item.type == type, limit=limit)


add_item_routes(
    router,
    entity="Media item",
    repository=lambda storage: storage.media,
    read_schema=MediaRead,
    create_schema=MediaCreate,
    update_schema=MediaUpdate,
)
