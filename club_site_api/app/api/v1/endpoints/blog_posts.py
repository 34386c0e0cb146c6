"""Blog endpoints.  Posts are listed newest first."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.blog import BlogPostCreate, BlogPostRead, BlogPostUpdate

from .crud import add_item_routes

router = APIRouter()


@router.get("", response_model=List[BlogPostRead])
async def list_blog_posts(
    limit: Optional[int] = Query(None, ge=1),
    storage: ClubStorage = Depends(get_storage),
) -> List[BlogPostRead]:
    return storage.blog_posts.list(limit=limit)


add_item_routes(
    router,
    entity="Blog post",
    repository=lambda storage: storage.blog_posts,
    read_schema=BlogPostRead,
    create_schema=BlogPostCreate,
    update_schema=BlogPostUpdate,
)
