"""
Raw material repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from ..models import RawMaterial
from .base_repository import BaseRepository


class RawMaterialRepository(BaseRepository[RawMaterial]):
    def __init__(self, session: Optional[Session] = None):
        super().__init__(RawMaterial, session)
