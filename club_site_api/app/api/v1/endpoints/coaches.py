"""Coaching staff endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.coach import CoachCreate, CoachRead, CoachUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[CoachRead])
async def list_coaches(storage: ClubStorage = Depends(get_storage)) -> List[CoachRead]:
    return storage.coaches.list()


add_item_routes(
    router,
    entity="Coach",
    repository=lambda storage: storage.coaches,
    read_schema=CoachRead,
    create_schema=CoachCreate,
    update_schema=CoachUpdate,
)
