"""Repository for event data access."""
from typing import Any, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..errors import RepositoryError
from ..models import Event
from .connection import Database

TABLE = "Event"
COLUMNS = (
    "id", "location", "department", "category", "priority",
    "description", "remarks", "reportedby", "operativeid",
)

_SELECT = "SELECT {} FROM {}".format(", ".join(COLUMNS), TABLE)


class EventRepository:
    """Read-only queries against the Event table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def list_all(self) -> List[Event]:
        """Return every event in the order the backend yields them."""
        try:
            with self.database.connect() as conn:
                rows = conn.execute(text(_SELECT)).all()
            return [self._decode(r._mapping) for r in rows]
        except SQLAlchemyError as e:
            raise RepositoryError(f"Listing events failed: {e}") from e

    def get_by_id(self, event_id: int) -> Optional[Event]:
        """Find one event by id. None means no row matched."""
        try:
            with self.database.connect() as conn:
                row = conn.execute(
                    text(f"{_SELECT} WHERE id = :id"), {"id": event_id}
                ).first()
            if row is None:
                return None
            return self._decode(row._mapping)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Loading event {event_id} failed: {e}") from e

    @staticmethod
    def _decode(row: Mapping[str, Any]) -> Event:
        try:
            return Event(
                id=int(row["id"]),
                location=row["location"],
                department=row["department"],
                category=row["category"],
                priority=row["priority"],
                description=row["description"],
                remarks=row["remarks"],
                reportedby=int(row["reportedby"]),
                operativeid=_optional_int(row["operativeid"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Undecodable event row: {e}") from e


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)
