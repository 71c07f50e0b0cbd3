"""
Exceptions raised by the inventory service layer.
"""
from __future__ import annotations


class InventoryError(Exception):
    """Base class for inventory service errors."""


class InvalidIdError(InventoryError):
    """No record exists for the requested id."""

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"invalid id: {entity_id}")


class MaterialLookupError(InventoryError):
    """Looking a material up failed for a reason other than it being absent."""

    def __init__(self, material_id: str):
        self.material_id = material_id
        super().__init__(f"failed to look up material {material_id}")
