from __future__ import annotations
import pytest
from inventory import create_app
from inventory.extensions import db
from inventory.models import MaterialRawMaterials, RawMaterial
from inventory.services import LogService, MaterialService


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "LOG_DIR": str(tmp_path / "logs"),
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def material_service(app):
    return MaterialService.default()


@pytest.fixture()
def log_service(app):
    return LogService()


@pytest.fixture()
def add_raw_material(app):
    def _add(rawmaterialid: str, name: str, **fields):
        r = RawMaterial(rawmaterialid=rawmaterialid, name=name, **fields)
        db.session.add(r)
        db.session.commit()
        return r
    return _add


@pytest.fixture()
def link(app):
    def _link(materialid: str, rawmaterialid: str):
        db.session.add(MaterialRawMaterials(materialid=materialid, rawmaterialid=rawmaterialid))
        db.session.commit()
    return _link
