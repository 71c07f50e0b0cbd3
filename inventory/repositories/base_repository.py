"""
Base Repository class providing common CRUD operations.
Implements the Repository pattern for data access abstraction.
"""
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy.orm import Session

from ..extensions import db

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """Base repository providing key-indexed data operations."""

    def __init__(self, model_class: type[T], session: Optional[Session] = None):
        self.model_class = model_class
        self.session = session or db.session

    def save(self, entity: T) -> T:
        """Insert or replace entity by primary key. Returns the persistent instance."""
        persistent = self.session.merge(entity)
        self.session.flush()
        return persistent

    def find_by_id(self, entity_id: Any) -> Optional[T]:
        """Get entity by primary key."""
        return self.session.get(self.model_class, entity_id)

    def find_all(self) -> List[T]:
        """Get all entities in the store's native order."""
        return self.session.query(self.model_class).all()

    def find_by(self, **kwargs) -> List[T]:
        """Find entities by arbitrary criteria."""
        query = self.session.query(self.model_class)
        for key, value in kwargs.items():
            if hasattr(self.model_class, key):
                if value is None:
                    query = query.filter(getattr(self.model_class, key).is_(None))
                else:
                    query = query.filter(getattr(self.model_class, key) == value)
        return query.all()

    def delete_by_id(self, entity_id: Any) -> bool:
        """Delete entity by primary key. Returns True if deleted, False if not found."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.flush()
        return True

    def commit(self) -> None:
        """Commit current session."""
        self.session.commit()

    def rollback(self) -> None:
        """Rollback current session."""
        self.session.rollback()
