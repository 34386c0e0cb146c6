"""
Fixture and result views over the match list.

The site shows two lists: upcoming fixtures, soonest first, and
completed results, most recent first.  Canceled matches appear in
neither.
"""

from typing import List, Optional

from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.schemas.match import MatchRead


class MatchService:
    @classmethod
    async def list_upcoming(cls, storage: ClubStorage, limit: Optional[int] = None) -> List[MatchRead]:
        """Upcoming matches in ascending date order."""
        return storage.matches.list(
            where=lambda match: match.status == "upcoming",
            limit=limit,
            descending=False,
        )

    @classmethod
    async def list_completed(cls, storage: ClubStorage, limit: Optional[int] = None) -> List[MatchRead]:
        """Completed matches in descending date order."""
        return storage.matches.list(
            where=lambda match: match.status == "completed",
            limit=limit,
            descending=True,
        )
