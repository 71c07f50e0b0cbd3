from __future__ import annotations
import pytest
from sqlalchemy.exc import OperationalError
from inventory.constants import LogTypes
from inventory.exceptions import InvalidIdError, MaterialLookupError
from inventory.models import Log, MaterialRawMaterials
from inventory.repositories import MaterialRawMaterialRepository, MaterialRepository
from inventory.schemas import MaterialRequestSchema, MaterialResponseSchema
from inventory.services import LogService, MaterialService, RawMaterialService


def material_logs():
    return Log.query.filter_by(category=LogTypes.MATERIAL.value).count()


def test_create_then_get(material_service):
    created = material_service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
    assert created.materialid == "M1"
    assert created.name == "Steel"

    found = material_service.get_material_by_id("M1")
    assert found is not None
    assert (found.materialid, found.name) == ("M1", "Steel")
    assert found.created_at is not None


def test_returned_records_outlive_the_app_context(app):
    with app.app_context():
        service = MaterialService.default()
        created = service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
        updated = service.update_material("M1", MaterialRequestSchema(name="Stainless Steel"))
        found = service.get_material_by_id("M1")
        listed = service.get_all_materials()

    assert isinstance(created, MaterialResponseSchema)
    assert created.name == "Steel"
    assert updated.name == "Stainless Steel"
    assert found.materialid == "M1"
    assert [(m.materialid, m.name) for m in listed] == [("M1", "Stainless Steel")]


def test_create_assigns_id_when_missing(material_service):
    created = material_service.create_material(MaterialRequestSchema(name="Copper", price=3.5))
    assert created.materialid
    assert material_service.get_material_by_id(created.materialid).price == 3.5


def test_create_writes_one_log(material_service):
    material_service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
    logs = Log.query.all()
    assert [(l.category, l.message) for l in logs] == [("MATERIAL", "Creating Material")]


def test_get_missing_returns_none(material_service):
    assert material_service.get_material_by_id("nope") is None


def test_get_lookup_failure_is_not_absent(app):
    class BrokenRepo(MaterialRepository):
        def find_by_id(self, entity_id):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

    log_service = LogService()
    service = MaterialService(
        BrokenRepo(), MaterialRawMaterialRepository(), RawMaterialService(log_service=log_service), log_service
    )
    with pytest.raises(MaterialLookupError) as exc_info:
        service.get_material_by_id("M1")
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_update_replaces_fields_and_forces_id(material_service):
    material_service.create_material(
        MaterialRequestSchema(materialid="M1", name="Steel", description="rolled", vendor="Acme", quantity=4)
    )
    updated = material_service.update_material(
        "M1", MaterialRequestSchema(materialid="OTHER", name="Stainless Steel", price=12.0)
    )
    assert updated.materialid == "M1"

    found = material_service.get_material_by_id("M1")
    assert found.name == "Stainless Steel"
    assert found.price == 12.0
    # full replace: fields absent from the request are cleared
    assert found.description is None
    assert found.vendor is None
    assert found.quantity is None
    assert material_service.get_material_by_id("OTHER") is None
    assert len(material_service.get_all_materials()) == 1


def test_update_missing_raises_without_mutation(material_service):
    material_service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
    before = material_logs()
    with pytest.raises(InvalidIdError) as exc_info:
        material_service.update_material("M2", MaterialRequestSchema(name="Iron"))
    assert exc_info.value.entity_id == "M2"
    assert material_logs() == before
    assert [m.materialid for m in material_service.get_all_materials()] == ["M1"]


def test_delete_then_get(material_service):
    material_service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
    assert material_service.delete_material("M1") == "success"
    assert material_service.get_material_by_id("M1") is None
    assert Log.query.filter_by(message="Material Deleted successfully").count() == 1


def test_delete_missing_raises_and_writes_no_log(material_service):
    with pytest.raises(InvalidIdError, match="invalid id"):
        material_service.delete_material("M404")
    assert Log.query.count() == 0


def test_list_operations_return_everything(material_service):
    for mid, name in [("M1", "Steel"), ("M2", "Wood"), ("M3", "Glass")]:
        material_service.create_material(MaterialRequestSchema(materialid=mid, name=name))

    all_ids = sorted(m.materialid for m in material_service.get_all_materials())
    inventory_ids = sorted(m.materialid for m in material_service.get_all_materials_in_inventory())
    assert all_ids == inventory_ids == ["M1", "M2", "M3"]
    messages = [l.message for l in Log.query.order_by(Log.id).all()]
    assert messages[-2:] == ["Returning all materials", "Returning full material inventory"]


def test_raw_materials_resolved_in_join_order(material_service, add_raw_material, link):
    material_service.create_material(MaterialRequestSchema(materialid="M1", name="Bicycle frame"))
    material_service.create_material(MaterialRequestSchema(materialid="M2", name="Wheel"))
    add_raw_material("R1", "Aluminium", vendor="Alco")
    add_raw_material("R2", "Carbon fibre")
    add_raw_material("R3", "Rubber")
    link("M1", "R1")
    link("M1", "R2")
    link("M2", "R3")

    raws = material_service.get_all_material_raw_materials("M1")
    assert [r.rawmaterialid for r in raws] == ["R1", "R2"]
    assert raws[0].name == "Aluminium"
    assert raws[0].vendor == "Alco"


def test_raw_materials_follow_join_row_order_not_key_order(app, add_raw_material):
    add_raw_material("R1", "Aluminium")
    add_raw_material("R2", "Carbon fibre")

    class UnsortedJoinRepo(MaterialRawMaterialRepository):
        def find_by_material_id(self, material_id):
            return [
                MaterialRawMaterials(materialid=material_id, rawmaterialid="R2"),
                MaterialRawMaterials(materialid=material_id, rawmaterialid="R1"),
            ]

    log_service = LogService()
    service = MaterialService(
        MaterialRepository(), UnsortedJoinRepo(), RawMaterialService(log_service=log_service), log_service
    )
    raws = service.get_all_material_raw_materials("M1")
    assert [r.rawmaterialid for r in raws] == ["R2", "R1"]
    assert [r.name for r in raws] == ["Carbon fibre", "Aluminium"]


def test_unresolvable_raw_material_is_kept_as_none(material_service, add_raw_material, link):
    material_service.create_material(MaterialRequestSchema(materialid="M1", name="Steel"))
    add_raw_material("R1", "Iron ore")
    link("M1", "R1")
    link("M1", "R9")

    raws = material_service.get_all_material_raw_materials("M1")
    assert len(raws) == 2
    assert raws[0].rawmaterialid == "R1"
    assert raws[1] is None


def test_material_without_links_has_no_raw_materials(material_service):
    assert material_service.get_all_material_raw_materials("M1") == []
    assert Log.query.filter_by(message="Returning all raw material in inventory").count() == 1
