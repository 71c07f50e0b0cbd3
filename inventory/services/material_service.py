"""
Material Service - Business Logic Layer
Creates, reads, updates and deletes materials and resolves the raw materials
each material is made from. Every public operation writes one audit entry.
"""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..constants import LogTypes
from ..exceptions import InvalidIdError, MaterialLookupError
from ..models import Material
from ..repositories import MaterialRawMaterialRepository, MaterialRepository
from ..schemas import MaterialRequestSchema, MaterialResponseSchema, RawMaterialResponseSchema
from ..utils.logging_utils import get_logger
from .base_service import BaseService
from .log_service import LogService
from .raw_material_service import RawMaterialService

logger = get_logger("services.material")


class MaterialService(BaseService):
    """Service for material domain operations."""

    def __init__(
        self,
        material_repo: MaterialRepository,
        material_raw_material_repo: MaterialRawMaterialRepository,
        raw_material_service: RawMaterialService,
        log_service: LogService,
        session: Optional[Session] = None,
    ):
        super().__init__(session)
        self.material_repo = material_repo
        self.material_raw_material_repo = material_raw_material_repo
        self.raw_material_service = raw_material_service
        self.log_service = log_service

    @classmethod
    def default(cls, session: Optional[Session] = None) -> "MaterialService":
        """Wire the service with the standard SQLAlchemy-backed collaborators."""
        log_service = LogService(session=session)
        return cls(
            MaterialRepository(session),
            MaterialRawMaterialRepository(session),
            RawMaterialService(log_service=log_service, session=session),
            log_service,
            session=session,
        )

    def create_material(self, request: MaterialRequestSchema) -> MaterialResponseSchema:
        """Persist the material described by the request and return the stored record."""
        try:
            material = self.material_repo.save(request.to_material())
            self.commit()
        except Exception:
            self.rollback()
            raise

        result = MaterialResponseSchema.model_validate(material)
        self.log_service.write_log(LogTypes.MATERIAL, "Creating Material")
        return result

    def get_all_materials(self) -> List[MaterialResponseSchema]:
        materials = self._list_materials()
        self.log_service.write_log(LogTypes.MATERIAL, "Returning all materials")
        return materials

    def get_material_by_id(self, material_id: str) -> Optional[MaterialResponseSchema]:
        """
        Return the material, or None if no row exists for the id.

        Raises MaterialLookupError when the lookup itself fails.
        """
        material = self._find_material(material_id)
        result = MaterialResponseSchema.model_validate(material) if material is not None else None
        self.log_service.write_log(LogTypes.MATERIAL, "Getting material using ID")
        return result

    def delete_material(self, material_id: str) -> str:
        if self._find_material(material_id) is None:
            raise InvalidIdError(material_id)

        try:
            self.material_repo.delete_by_id(material_id)
            self.commit()
        except Exception:
            self.rollback()
            raise

        self.log_service.write_log(LogTypes.MATERIAL, "Material Deleted successfully")
        return "success"

    def update_material(self, material_id: str, request: MaterialRequestSchema) -> MaterialResponseSchema:
        """Replace every field of an existing material. The id in the request is ignored."""
        if self._find_material(material_id) is None:
            raise InvalidIdError(material_id)

        material = request.to_material()
        material.materialid = material_id
        try:
            material = self.material_repo.save(material)
            self.commit()
        except Exception:
            self.rollback()
            raise

        result = MaterialResponseSchema.model_validate(material)
        self.log_service.write_log(LogTypes.MATERIAL, "Updating Material ID")
        return result

    def get_all_materials_in_inventory(self) -> List[MaterialResponseSchema]:
        """Same result as get_all_materials, audited as an inventory listing."""
        materials = self._list_materials()
        self.log_service.write_log(LogTypes.MATERIAL, "Returning full material inventory")
        return materials

    def get_all_material_raw_materials(
        self, material_id: str
    ) -> List[Optional[RawMaterialResponseSchema]]:
        """
        Resolve each raw material linked to a material, in join-row order.

        A link whose raw material cannot be resolved yields None, so the result
        always has one entry per join row.
        """
        links = self.material_raw_material_repo.find_by_material_id(material_id)
        raw_materials = [
            self.raw_material_service.get_raw_material_by_id(link.rawmaterialid) for link in links
        ]
        self.log_service.write_log(LogTypes.MATERIAL, "Returning all raw material in inventory")
        return raw_materials

    def _list_materials(self) -> List[MaterialResponseSchema]:
        return [MaterialResponseSchema.model_validate(m) for m in self.material_repo.find_all()]

    def _find_material(self, material_id: str) -> Optional[Material]:
        try:
            return self.material_repo.find_by_id(material_id)
        except SQLAlchemyError as exc:
            self.rollback()
            logger.error("Lookup of material %s failed: %s", material_id, exc)
            raise MaterialLookupError(material_id) from exc
