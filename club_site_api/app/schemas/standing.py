"""Pydantic schemas for league table rows."""

from typing import Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record


class StandingBase(BaseModel):
    team: str = Field(..., min_length=1, examples=["Dynamo"])
    position: NonNegativeInt = Field(..., examples=[1], description="Place in the table, 1 is top")
    played: NonNegativeInt
    won: NonNegativeInt
    drawn: NonNegativeInt
    lost: NonNegativeInt
    goals_for: NonNegativeInt
    goals_against: NonNegativeInt
    points: int


class StandingCreate(StandingBase):
    pass


class StandingUpdate(PartialUpdate):
    team: Optional[str] = Field(None, min_length=1)
    position: Optional[NonNegativeInt] = None
    played: Optional[NonNegativeInt] = None
    won: Optional[NonNegativeInt] = None
    drawn: Optional[NonNegativeInt] = None
    lost: Optional[NonNegativeInt] = None
    goals_for: Optional[NonNegativeInt] = None
    goals_against: Optional[NonNegativeInt] = None
    points: Optional[int] = None


class StandingRead(StandingBase, Record):
    pass
