"""
Pydantic schemas for data validation and serialization.
Provides type-safe data models for service requests and responses.
"""
from .material_schemas import (
    MaterialRequestSchema,
    MaterialResponseSchema
)
from .raw_material_schemas import RawMaterialResponseSchema

__all__ = [
    # Material schemas
    'MaterialRequestSchema',
    'MaterialResponseSchema',

    # Raw material schemas
    'RawMaterialResponseSchema'
]
