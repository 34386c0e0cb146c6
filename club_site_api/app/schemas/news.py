"""Pydantic schemas for club news articles."""

import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record


class NewsBase(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(None, description="Short teaser shown in lists")
    image_url: Optional[str] = None
    category: str = Field(..., min_length=1, examples=["Transfers"])
    date: datetime.date = Field(..., examples=["2023-05-10"])
    views: NonNegativeInt = 0
    comments: NonNegativeInt = 0


class NewsCreate(NewsBase):
    pass


class NewsUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"excerpt", "image_url"})

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime.date] = None
    views: Optional[NonNegativeInt] = None
    comments: Optional[NonNegativeInt] = None


class NewsRead(NewsBase, Record):
    pass
