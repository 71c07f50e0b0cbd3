"""
Material Repository implementation with material-specific operations.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Material, MaterialRawMaterials
from .base_repository import BaseRepository


class MaterialRepository(BaseRepository[Material]):
    """Repository for Material records keyed by materialid."""

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Material, session)


class MaterialRawMaterialRepository(BaseRepository[MaterialRawMaterials]):
    """Read access to the material/raw-material join table."""

    def __init__(self, session: Optional[Session] = None):
        super().__init__(MaterialRawMaterials, session)

    def find_by_material_id(self, material_id: str) -> List[MaterialRawMaterials]:
        """Find all join rows for a material."""
        return self.find_by(materialid=material_id)
