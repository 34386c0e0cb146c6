"""
In-memory persistence for the club site.

The site keeps every entity in process memory.  A single generic
:class:`Repository` implements create/read/update/delete for one entity
type and is instantiated once per type by :class:`ClubStorage`, which
is the object the application builds at startup and hands to the
routes through a dependency.  Nothing here touches disk, so all data
is lost when the process exits.

Records are immutable pydantic models.  ``update`` therefore replaces
the stored record with a revalidated copy instead of mutating it, and
callers can hold on to returned records without seeing later changes.

Identifiers come from a per-repository counter that starts at 1, only
moves forward and is never rewound by deletes.  The counter and the
map are guarded by a re-entrant lock so the same repository can be
used from uvicorn's thread pool.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from club_site_api.app.schemas.blog import BlogPostRead
from club_site_api.app.schemas.coach import CoachRead
from club_site_api.app.schemas.contact import ContactMessageRead
from club_site_api.app.schemas.history import HistoryRead
from club_site_api.app.schemas.match import MatchRead
from club_site_api.app.schemas.media import MediaRead
from club_site_api.app.schemas.news import NewsRead
from club_site_api.app.schemas.player import PlayerRead
from club_site_api.app.schemas.standing import StandingRead
from club_site_api.app.schemas.user import User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(Generic[RecordT]):
    """Identifier-keyed store for one entity type.

    Parameters
    ----------
    name : str
        Human readable entity name used in log lines.
    record_type : type
        Pydantic model describing a stored record.  It must declare an
        integer ``id`` field.
    order_by : callable, optional
        Sort key applied by :meth:`list`.  Without it records come back
        in insertion order.
    descending : bool
        Reverse the ``order_by`` ordering.
    """

    def __init__(
        self,
        name: str,
        record_type: Type[RecordT],
        order_by: Optional[Callable[[RecordT], Any]] = None,
        descending: bool = False,
    ) -> None:
        self.name = name
        self.record_type = record_type
        self.order_by = order_by
        self.descending = descending
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def list(
        self,
        where: Optional[Callable[[RecordT], bool]] = None,
        limit: Optional[int] = None,
        descending: Optional[bool] = None,
    ) -> List[RecordT]:
        """Return stored records in the repository's order.

        ``where`` keeps only records for which it returns true, ``limit``
        truncates the ordered result and ``descending`` overrides the
        configured direction for this call.
        """
        with self._lock:
            records = list(self._records.values())
        if where is not None:
            records = [record for record in records if where(record)]
        if self.order_by is not None:
            reverse = self.descending if descending is None else descending
            # sorted() is stable, so ties keep insertion order
            records = sorted(records, key=self.order_by, reverse=reverse)
        if limit is not None:
            records = records[:limit]
        return records

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            return self._records.get(record_id)

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """Return the first record (in insertion order) matching ``predicate``."""
        with self._lock:
            for record in self._records.values():
                if predicate(record):
                    return record
        return None

    def create(self, payload: Mapping[str, Any]) -> RecordT:
        """Store a new record built from ``payload`` and return it.

        The record receives the current counter value as its ``id``;
        fields missing from ``payload`` take the record model defaults.
        The counter only advances once the record validated.
        """
        with self._lock:
            data = dict(payload)
            data["id"] = self._next_id
            record = self.record_type.model_validate(data)
            self._records[record.id] = record
            self._next_id += 1
        logger.info("Created %s %s", self.name, record.id)
        return record

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """Merge ``changes`` into an existing record.

        Keys absent from ``changes`` keep their stored values.  Returns
        the new record, or ``None`` when ``record_id`` is unknown.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            merged = current.model_dump()
            merged.update({key: value for key, value in changes.items() if key != "id"})
            record = self.record_type.model_validate(merged)
            self._records[record_id] = record
        if changes:
            logger.info("Updated %s %s (%s)", self.name, record_id, ", ".join(sorted(changes)))
        return record

    def delete(self, record_id: int) -> bool:
        """Remove a record.  Returns whether one was present."""
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.info("Deleted %s %s", self.name, record_id)
        return True

    def clear(self) -> None:
        """Drop every record.  The identifier counter is left untouched."""
        with self._lock:
            self._records.clear()


class ClubStorage:
    """All repositories used by the site, one per entity type."""

    def __init__(self) -> None:
        self.users: Repository[User] = Repository("user", User)
        self.players: Repository[PlayerRead] = Repository("player", PlayerRead)
        self.coaches: Repository[CoachRead] = Repository("coach", CoachRead)
        self.matches: Repository[MatchRead] = Repository(
            "match", MatchRead, order_by=lambda match: match.date
        )
        self.news: Repository[NewsRead] = Repository(
            "news", NewsRead, order_by=lambda item: item.date, descending=True
        )
        self.blog_posts: Repository[BlogPostRead] = Repository(
            "blog post", BlogPostRead, order_by=lambda post: post.date, descending=True
        )
        self.media: Repository[MediaRead] = Repository(
            "media", MediaRead, order_by=lambda item: item.date, descending=True
        )
        self.standings: Repository[StandingRead] = Repository(
            "standing", StandingRead, order_by=lambda row: row.position
        )
        self.contact_messages: Repository[ContactMessageRead] = Repository(
            "contact message", ContactMessageRead, order_by=lambda message: message.date, descending=True
        )
        self.history: Repository[HistoryRead] = Repository(
            "history entry", HistoryRead, order_by=lambda item: item.year
        )

    def repositories(self) -> List[Repository]:
        return [
            self.users,
            self.players,
            self.coaches,
            self.matches,
            self.news,
            self.blog_posts,
            self.media,
            self.standings,
            self.contact_messages,
            self.history,
        ]

    def clear(self) -> None:
        for repository in self.repositories():
            repository.clear()
        logger.info("Storage cleared")
