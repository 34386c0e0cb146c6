"""
Shared item routes for the entity endpoints.

Every entity exposes the same single-item routes::

    GET    /<entity>/{id}   read one record (404 if absent)
    POST   /<entity>        admin only, create from a full payload (201)
    PUT    /<entity>/{id}   admin only, merge a partial payload (404 if absent)
    DELETE /<entity>/{id}   admin only, remove the record (204, 404 if absent)

``add_item_routes`` attaches them to an entity router.  The admin gate
is the ``require_admin`` dependency and validation is done by FastAPI
against the entity's create/update schema, so individual endpoint
modules only declare their list routes and anything entity specific.
Routes declared on a router before calling this function take
precedence over ``/{id}`` (e.g. ``/matches/upcoming``).
"""

from typing import Callable, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from club_site_api.app.core.security import require_admin
from club_site_api.app.core.storage import ClubStorage, Repository
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.common import PartialUpdate

RepositoryGetter = Callable[[ClubStorage], Repository]


def add_item_routes(
    router: APIRouter,
    *,
    entity: str,
    repository: RepositoryGetter,
    read_schema: Type[BaseModel],
    create_schema: Optional[Type[BaseModel]] = None,
    update_schema: Optional[Type[PartialUpdate]] = None,
    admin_reads: bool = False,
) -> None:
    """Register get/create/update/delete routes for one entity.

    Parameters
    ----------
    router : APIRouter
        Router of the entity, mounted under its collection prefix.
    entity : str
        Display name used in error messages, e.g. ``"Player"``.
    repository : callable
        Picks the entity's repository out of the store.
    read_schema : type
        Response model of a stored record.
    create_schema, update_schema : type, optional
        Payload schemas.  Leaving one out skips the matching route.
    admin_reads : bool
        Put the single-item read behind the admin gate as well.
    """
    not_found = f"{entity} not found"
    slug = entity.lower().replace(" ", "_")
    read_dependencies = [Depends(require_admin)] if admin_reads else []

    @router.get(
        "/{item_id}",
        response_model=read_schema,
        dependencies=read_dependencies,
        name=f"get_{slug}",
    )
    async def get_item(item_id: int, storage: ClubStorage = Depends(get_storage)):
        record = repository(storage).get(item_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    if create_schema is not None:

        @router.post(
            "",
            response_model=read_schema,
            status_code=status.HTTP_201_CREATED,
            dependencies=[Depends(require_admin)],
            name=f"create_{slug}",
        )
        async def create_item(payload: create_schema, storage: ClubStorage = Depends(get_storage)):
            return repository(storage).create(payload.model_dump())

    if update_schema is not None:

        @router.put(
            "/{item_id}",
            response_model=read_schema,
            dependencies=[Depends(require_admin)],
            name=f"update_{slug}",
        )
        async def update_item(
            item_id: int,
            payload: update_schema,
            storage: ClubStorage = Depends(get_storage),
        ):
            record = repository(storage).update(item_id, payload.changes())
            if record is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
            return record

    @router.delete(
        "/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        dependencies=[Depends(require_admin)],
        name=f"delete_{slug}",
    )
    async def delete_item(item_id: int, storage: ClubStorage = Depends(get_storage)) -> None:
        if not repository(storage).delete(item_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return None
