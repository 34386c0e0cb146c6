"""
Pydantic schemas for the photo and video gallery.

``date`` defaults to the day the item is uploaded when the client does
not send one.  ``duration`` and ``thumbnail_url`` are only meaningful
for videos but are not enforced either way.
"""

import datetime
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record

MediaType = Literal["photo", "video"]


class MediaBase(BaseModel):
    type: MediaType = Field(..., examples=["photo"])
    title: Optional[str] = None
    url: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    category: Optional[str] = Field(None, examples=["Matches"])
    date: datetime.date = Field(default_factory=datetime.date.today)
    duration: Optional[str] = Field(None, examples=["12:34"], description="Video length, mm:ss")
    views: NonNegativeInt = 0


class MediaCreate(MediaBase):
    pass


class MediaUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"title", "thumbnail_url", "category", "duration"}
    )

    type: Optional[MediaType] = None
    title: Optional[str] = None
    url: Optional[str] = Field(None, min_length=1)
    thumbnail_url: Optional[str] = None
    category: Optional[str] = None
    date: Optional[datetime.date] = None
    duration: Optional[str] = None
    views: Optional[NonNegativeInt] = None


class MediaRead(MediaBase, Record):
    pass
