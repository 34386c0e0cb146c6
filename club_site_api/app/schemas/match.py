"""
Pydantic schemas for fixtures and results.

Team names are stored as plain strings; nothing checks them against the
standings table.  Scores stay empty until the match is played, and the
``status`` field is what separates the fixture list from the results
list.
"""

import datetime
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .common import PartialUpdate, Record

MatchStatus = Literal["upcoming", "completed", "canceled"]


class MatchBase(BaseModel):
    date: datetime.date = Field(..., examples=["2023-05-15"])
    time: str = Field(..., min_length=1, examples=["19:30"], description="Kick-off time, local")
    competition: str = Field(..., min_length=1, examples=["Championship"])
    home_team: str = Field(..., min_length=1)
    away_team: str = Field(..., min_length=1)
    home_team_logo: Optional[str] = None
    away_team_logo: Optional[str] = None
    home_score: Optional[NonNegativeInt] = None
    away_score: Optional[NonNegativeInt] = None
    stadium: str = Field(..., min_length=1)
    status: MatchStatus = "upcoming"
    round: Optional[str] = Field(None, examples=["Round 24"])


class MatchCreate(MatchBase):
    """Schema for scheduling a match."""


class MatchUpdate(PartialUpdate):
    """Schema for editing a match, e.g. recording the final score.

    All fields are optional; only provided values are applied.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"home_team_logo", "away_team_logo", "home_score", "away_score", "round"}
    )

    date: Optional[datetime.date] = None
    time: Optional[str] = Field(None, min_length=1)
    competition: Optional[str] = Field(None, min_length=1)
    home_team: Optional[str] = Field(None, min_length=1)
    away_team: Optional[str] = Field(None, min_length=1)
    home_team_logo: Optional[str] = None
    away_team_logo: Optional[str] = None
    home_score: Optional[NonNegativeInt] = None
    away_score: Optional[NonNegativeInt] = None
    stadium: Optional[str] = Field(None, min_length=1)
    status: Optional[MatchStatus] = None
    round: Optional[str] = None


class MatchRead(MatchBase, Record):
    """A stored match."""
