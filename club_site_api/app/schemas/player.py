"""
Pydantic schemas for squad players.

A player carries shirt details plus running season statistics
(appearances, goals, assists, clean sheets).  The statistics default to
zero so a player can be added before the season starts.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record


class PlayerBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Ivan Petrov"])
    position: str = Field(..., min_length=1, examples=["Forward"])
    number: NonNegativeInt = Field(..., examples=[9], description="Shirt number")
    age: NonNegativeInt = Field(..., examples=[24])
    matches: NonNegativeInt = Field(0, description="Appearances this season")
    goals: NonNegativeInt = 0
    assists: NonNegativeInt = 0
    clean_sheets: NonNegativeInt = 0
    image_url: Optional[str] = None


class PlayerCreate(PlayerBase):
    """Schema for adding a player to the squad."""


class PlayerUpdate(PartialUpdate):
    """Schema for updating a player; only provided fields change."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    number: Optional[NonNegativeInt] = None
    age: Optional[NonNegativeInt] = None
    matches: Optional[NonNegativeInt] = None
    goals: Optional[NonNegativeInt] = None
    assists: Optional[NonNegativeInt] = None
    clean_sheets: Optional[NonNegativeInt] = None
    image_url: Optional[str] = None


class PlayerRead(PlayerBase, Record):
    """A stored player."""
