"""
Pydantic schemas for blog posts.

Posts are written by staff.  ``author_id`` refers to a user account but
is stored as a plain number together with a copy of the author's
display name and avatar, so deleting the account leaves the post as is.
"""

import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record


class BlogPostBase(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    author_id: int = Field(..., examples=[1])
    author_name: str = Field(..., min_length=1)
    author_avatar: Optional[str] = None
    date: datetime.date = Field(..., examples=["2023-05-03"])
    image_url: Optional[str] = None
    views: NonNegativeInt = 0
    comments: NonNegativeInt = 0


class BlogPostCreate(BlogPostBase):
    """Schema for publishing a blog post."""


class BlogPostUpdate(PartialUpdate):
    """Schema for editing a blog post."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"excerpt", "author_avatar", "image_url"})

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    author_id: Optional[int] = None
    author_name: Optional[str] = Field(None, min_length=1)
    author_avatar: Optional[str] = None
    date: Optional[datetime.date] = None
    image_url: Optional[str] = None
    views: Optional[NonNegativeInt] = None
    comments: Optional[NonNegativeInt] = None


class BlogPostRead(BlogPostBase, Record):
    """A stored blog post."""
