"""Database layer."""
from .connection import Database, build_url
from .event_repository import EventRepository

__all__ = ['Database', 'build_url', 'EventRepository']
