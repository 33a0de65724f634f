"""Storage package."""

from .db import configure_engine, get_session, init_db
from .models import KeyValueEntry
from .stores import MemoryStore, SqlStore

__all__ = [
    "configure_engine",
    "get_session",
    "init_db",
    "KeyValueEntry",
    "MemoryStore",
    "SqlStore",
]
