"""
Pydantic schemas for messages sent through the public contact form.

Visitors only supply the four text fields.  The submission date and the
``read`` flag belong to the server: the date is stamped when the
message arrives and ``read`` starts out false until an administrator
opens it.
"""

import datetime

from pydantic import BaseModel, Field

from .common import Record


class ContactMessageCreate(BaseModel):
    """Payload of the public contact form."""

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320, examples=["fan@example.com"])
    subject: str = Field(..., min_length=1, max_length=300)
    message: str = Field(..., min_length=1)


class ContactMessageRead(ContactMessageCreate, Record):
    """A stored contact message."""

    date: datetime.date
    read: bool = False
