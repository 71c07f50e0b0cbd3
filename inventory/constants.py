"""审计日志分类标签。"""
from __future__ import annotations
from enum import Enum


class LogTypes(str, Enum):
    MATERIAL = "MATERIAL"
    RAW_MATERIAL = "RAW_MATERIAL"
    PRODUCT = "PRODUCT"
    INVENTORY = "INVENTORY"
    ORDER = "ORDER"
    USER = "USER"
