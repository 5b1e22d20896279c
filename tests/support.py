"""Shared fixtures: an in-memory Event table behind a Database."""
from typing import Any, Dict, Iterable
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool
from eventapi.db import Database

SCHEMA = """
    CREATE TABLE Event (
        id INTEGER PRIMARY KEY,
        location TEXT NOT NULL,
        department TEXT NOT NULL,
        category TEXT NOT NULL,
        priority TEXT NOT NULL,
        description TEXT,
        remarks TEXT,
        reportedby INTEGER NOT NULL,
        operativeid INTEGER
    )
"""


def make_row(id_: int, **overrides: Any) -> Dict[str, Any]:
    """Build a full Event row with sensible values."""
    row: Dict[str, Any] = {
        "id": id_,
        "location": f"Block {id_}",
        "department": "Security",
        "category": "Theft",
        "priority": "High",
        "description": "Bike stolen",
        "remarks": "Camera 4",
        "reportedby": 100 + id_,
        "operativeid": 7,
    }
    row.update(overrides)
    return row


def memory_database(rows: Iterable[Dict[str, Any]] = ()) -> Database:
    """Return a Database over a fresh in-memory SQLite Event table."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(text(SCHEMA))
        for row in rows:
            conn.execute(text("""
                INSERT INTO Event (id, location, department, category, priority,
                                   description, remarks, reportedby, operativeid)
                VALUES (:id, :location, :department, :category, :priority,
                        :description, :remarks, :reportedby, :operativeid)
            """), row)
    return Database(engine)
