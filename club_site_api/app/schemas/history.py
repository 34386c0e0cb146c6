"""Pydantic schemas for club history milestones."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from .common import PartialUpdate, Record


class HistoryBase(BaseModel):
    year: int = Field(..., examples=[1995])
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    # 1-3, 3 marks the most important milestones on the timeline
    importance: int = Field(1, ge=1, le=3)


class HistoryCreate(HistoryBase):
    pass


class HistoryUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    year: Optional[int] = None
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    importance: Optional[int] = Field(None, ge=1, le=3)


class HistoryRead(HistoryBase, Record):
    pass
