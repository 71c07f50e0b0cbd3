"""SQLAlchemy 模型定义（SQLite 兼容）。
包含：materials, raw_materials, material_raw_materials, logs

material_raw_materials 为物料与原料的关联表，本服务只读。
"""
from __future__ import annotations
import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from .extensions import db


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# 辅助 mixin
class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=_utcnow, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=_utcnow, onupdate=_utcnow, nullable=False)


class Material(db.Model, TimestampMixin):
    __tablename__ = "materials"
    materialid: Mapped[str] = mapped_column(primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[Optional[str]] = mapped_column(nullable=True)
    price: Mapped[Optional[float]] = mapped_column(nullable=True)
    quantity: Mapped[Optional[int]] = mapped_column(nullable=True)
    vendor: Mapped[Optional[str]] = mapped_column(nullable=True)


class RawMaterial(db.Model, TimestampMixin):
    __tablename__ = "raw_materials"
    rawmaterialid: Mapped[str] = mapped_column(primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[Optional[str]] = mapped_column(nullable=True)
    price: Mapped[Optional[float]] = mapped_column(nullable=True)
    quantity: Mapped[Optional[int]] = mapped_column(nullable=True)
    vendor: Mapped[Optional[str]] = mapped_column(nullable=True)


class MaterialRawMaterials(db.Model, TimestampMixin):
    __tablename__ = "material_raw_materials"
    # 复合主键 (materialid, rawmaterialid)
    materialid: Mapped[str] = mapped_column(ForeignKey("materials.materialid"), primary_key=True)
    rawmaterialid: Mapped[str] = mapped_column(ForeignKey("raw_materials.rawmaterialid"), primary_key=True)


class Log(db.Model, TimestampMixin):
    __tablename__ = "logs"
    id: Mapped[int] = mapped_column(primary_key=True)
    category: Mapped[str] = mapped_column(nullable=False, index=True)
    message: Mapped[str] = mapped_column(nullable=False)
