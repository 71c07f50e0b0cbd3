"""应用配置。
可通过环境变量覆盖，默认使用 SQLite 本地文件。
"""
from __future__ import annotations
import os
from pathlib import Path


class Config:
    BASE_DIR: Path = Path(__file__).resolve().parent.parent  # 项目根目录
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret")
    DATA_DIR: str = os.environ.get("DATA_DIR", str((BASE_DIR / "data").resolve()))
    # 绝对路径 SQLite，注意 Windows 需使用正斜杠
    _default_db_path = str((Path(DATA_DIR) / "inventory.sqlite").resolve()).replace("\\", "/")
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("DATABASE_URL", f"sqlite:///{_default_db_path}")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Logging
    LOG_DIR: str = os.environ.get("LOG_DIR", "logs")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
