"""Flask 扩展集中初始化。"""

from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy

# 全局扩展实例

db: SQLAlchemy = SQLAlchemy()
