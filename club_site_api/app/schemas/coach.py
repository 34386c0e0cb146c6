"""Pydantic schemas for coaching staff."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record


class CoachBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Andrei Shevchenko"])
    position: str = Field(..., min_length=1, examples=["Head coach"])
    join_year: NonNegativeInt = Field(..., examples=[2021])
    achievements: Optional[str] = None
    image_url: Optional[str] = None


class CoachCreate(CoachBase):
    pass


class CoachUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"achievements", "image_url"})

    name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    join_year: Optional[NonNegativeInt] = None
    achievements: Optional[str] = None
    image_url: Optional[str] = None


class CoachRead(CoachBase, Record):
    pass
