"""SQLAlchemy ORM models for StandTimer."""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class KeyValueEntry(Base):
    """One key of the app's key-value store (value is JSON text)."""

    __tablename__ = "kv_entries"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False, default="null")
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    def __repr__(self) -> str:
        return f"<KeyValueEntry key={self.key} updated_at={self.updated_at}>"
