"""
The contact inbox.

Messages arrive from the public form on the site and are read by
administrators in the back office.  The service stamps each message
with the day it was received and tracks whether it has been read.
"""

import datetime
import logging
from typing import Optional

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.schemas.contact import ContactMessageCreate, ContactMessageRead

logger = logging.getLogger(__name__)


class ContactService:
    """Operations on contact form messages."""

    @classmethod
    async def submit(
        cls,
        storage: ClubStorage,
        data: ContactMessageCreate,
        received_on: Optional[datetime.date] = None,
    ) -> ContactMessageRead:
        """Store a new message as unread, dated ``received_on`` (today by default)."""
        payload = data.model_dump()
        payload["date"] = received_on or datetime.date.today()
        payload["read"] = False
        message = storage.contact_messages.create(payload)
        logger.info("Contact message %s received from %s", message.id, message.email)
        return message

    @classmethod
    async def mark_read(cls, storage: ClubStorage, message_id: int) -> Optional[ContactMessageRead]:
        """Flag a message as read.  Returns ``None`` if it does not exist."""
        return storage.contact_messages.update(message_id, {"read": True})
