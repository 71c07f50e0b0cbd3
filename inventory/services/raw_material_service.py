"""
Raw material lookups used when resolving a material's composition.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..constants import LogTypes
from ..repositories import RawMaterialRepository
from ..schemas import RawMaterialResponseSchema
from ..utils.logging_utils import get_logger
from .base_service import BaseService
from .log_service import LogService

logger = get_logger("services.raw_material")


class RawMaterialService(BaseService):
    def __init__(
        self,
        raw_material_repo: Optional[RawMaterialRepository] = None,
        log_service: Optional[LogService] = None,
        session: Optional[Session] = None,
    ):
        super().__init__(session)
        self.raw_material_repo = raw_material_repo or RawMaterialRepository(self.session)
        self.log_service = log_service or LogService(session=self.session)

    def get_raw_material_by_id(self, raw_material_id: str) -> Optional[RawMaterialResponseSchema]:
        raw_material = self.raw_material_repo.find_by_id(raw_material_id)
        if raw_material is None:
            logger.debug("Raw material %s not found", raw_material_id)
            return None
        return RawMaterialResponseSchema.model_validate(raw_material)

    def get_all_raw_materials(self) -> List[RawMaterialResponseSchema]:
        items = [
            RawMaterialResponseSchema.model_validate(r) for r in self.raw_material_repo.find_all()
        ]
        self.log_service.write_log(LogTypes.RAW_MATERIAL, "Returning all raw materials")
        return items
