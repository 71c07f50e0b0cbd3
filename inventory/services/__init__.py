"""
Business logic service layer.
Provides high-level business operations using repositories.
"""
from .base_service import BaseService
from .log_service import LogService
from .material_service import MaterialService
from .raw_material_service import RawMaterialService

__all__ = [
    'BaseService',
    'LogService',
    'MaterialService',
    'RawMaterialService'
]
