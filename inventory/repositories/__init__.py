"""
Repository pattern implementation for data access abstraction.
Provides a uniform interface for data operations across different entities.
"""

from .base_repository import BaseRepository
from .log_repository import LogRepository
from .material_repository import MaterialRawMaterialRepository, MaterialRepository
from .raw_material_repository import RawMaterialRepository

__all__ = [
    "BaseRepository",
    "LogRepository",
    "MaterialRepository",
    "MaterialRawMaterialRepository",
    "RawMaterialRepository",
]
