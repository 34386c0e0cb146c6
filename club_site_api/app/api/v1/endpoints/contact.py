"""
Contact form endpoints.

Anyone may submit a message; everything else (reading the inbox,
marking messages as read, deleting them) is for administrators only.
Messages cannot be edited.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from club_site_api.app.core.security import require_admin
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_storage
from club_site_api.app.schemas.contact import ContactMessageCreate, ContactMessageRead
from club_site_api.app.services.contact_service import ContactService

from .crud import add_item_routes

router = APIRouter()


@router.post("", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    message_in: ContactMessageCreate,
    storage: ClubStorage = Depends(get_storage),
) -> ContactMessageRead:
    """Accept a message from the public contact form.

    The message is stored unread and dated today; any ``date`` or
    ``read`` value in the request is ignored.
    """
    return await ContactService.submit(storage, message_in)


@router.get(
    "",
    response_model=List[ContactMessageRead],
    dependencies=[Depends(require_admin)],
)
async def list_contact_messages(storage: ClubStorage = Depends(get_storage)) -> List[ContactMessageRead]:
    """Return the inbox, newest first (admin only)."""
    return storage.contact_messages.list()


@router.put(
    "/{message_id}/read",
    response_model=ContactMessageRead,
    dependencies=[Depends(require_admin)],
)
async def mark_contact_message_read(
    message_id: int,
    storage: ClubStorage = Depends(get_storage),
) -> ContactMessageRead:
    """Mark a message as read (admin only)."""
    message = await ContactService.mark_read(storage, message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message


add_item_routes(
    router,
    entity="Message",
    repository=lambda storage: storage.contact_messages,
    read_schema=ContactMessageRead,
    admin_reads=True,
)
