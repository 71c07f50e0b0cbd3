"""
Pydantic schemas for material-related operations.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Material


class MaterialRequestSchema(BaseModel):
    """Schema for creating or replacing a material."""

    materialid: Optional[str] = Field(
        None, min_length=1, max_length=64, description="Material id, generated when omitted"
    )
    name: str = Field(..., min_length=1, max_length=100, description="Material name")
    description: Optional[str] = Field(None, max_length=500, description="Material description")
    price: Optional[float] = Field(None, ge=0, description="Unit price")
    quantity: Optional[int] = Field(None, ge=0, description="Quantity in stock")
    vendor: Optional[str] = Field(None, max_length=100, description="Vendor name")

    @field_validator("materialid")
    @classmethod
    def validate_materialid(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Material id cannot be empty")
        return v.strip() if v else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Material name cannot be empty")
        return v.strip()

    def to_material(self) -> Material:
        """Build a Material with every field set, so a save replaces the stored row."""
        data = self.model_dump()
        if data["materialid"] is None:
            data.pop("materialid")
        return Material(**data)


class MaterialResponseSchema(BaseModel):
    """Schema for material responses."""

    model_config = ConfigDict(from_attributes=True)

    materialid: str
    name: str
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    vendor: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
