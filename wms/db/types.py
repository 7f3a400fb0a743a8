"""Column Types — timezone-aware timestamps on every backend.

Invariants:
    - Values read back are always timezone-aware UTC
    - Naive values written are taken as UTC

Design Decisions:
    - SQLite drops tzinfo on round trip; normalizing here keeps API output
      identical between PostgreSQL and the SQLite test database
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class UtcDateTime(TypeDecorator):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
