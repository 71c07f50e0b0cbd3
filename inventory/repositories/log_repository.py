"""
Audit log repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Log
from .base_repository import BaseRepository


class LogRepository(BaseRepository[Log]):
    """Append-only access to audit log rows."""

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Log, session)

    def append(self, category: str, message: str) -> Log:
        entry = Log(category=category, message=message)
        self.session.add(entry)
        self.session.flush()
        return entry

    def find_recent(self, category: Optional[str] = None, limit: int = 200) -> List[Log]:
        """Newest entries first, optionally restricted to one category."""
        query = self.session.query(Log)
        if category:
            query = query.filter(Log.category == category)
        return query.order_by(Log.created_at.desc(), Log.id.desc()).limit(limit).all()
