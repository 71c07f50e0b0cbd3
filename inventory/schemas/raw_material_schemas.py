"""
Pydantic schemas for raw materials.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RawMaterialResponseSchema(BaseModel):
    """Schema for raw material responses."""

    model_config = ConfigDict(from_attributes=True)

    rawmaterialid: str
    name: str
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    vendor: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
