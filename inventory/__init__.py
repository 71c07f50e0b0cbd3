"""app 工厂与初始化逻辑。
注册扩展与日志；不提供 HTTP 路由。
"""
from __future__ import annotations
import os
from typing import Any, Mapping, Optional
from flask import Flask
from .config import Config
from .extensions import db
from .utils.logging_utils import get_logger, setup_logging


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # 基础配置
    app.config.from_object(Config())
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config.get("LOG_DIR"), app.config.get("LOG_LEVEL"))

    # 确保本地目录存在（使用绝对路径）
    data_dir = app.config.get("DATA_DIR")
    if data_dir and app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(data_dir, exist_ok=True)

    # 初始化扩展
    db.init_app(app)

    # 数据库自动初始化
    from . import models  # noqa: F401
    with app.app_context():
        db.create_all()

    get_logger("app").info("Application created")
    return app
