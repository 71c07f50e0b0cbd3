"""清除历史数据并重建数据库（谨慎使用）。

用法：
  python scripts/reset_db.py --yes
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 确保可直接运行脚本时能找到 inventory 包
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory import create_app  # noqa: E402
from inventory.extensions import db  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="危险操作：清空数据库并重建")
    ap.add_argument("--yes", action="store_true", help="跳过确认，直接执行")
    args = ap.parse_args()

    if not args.yes:
        print("该操作将清除所有物料、原料与审计日志，且不可恢复。")
        ok = input("确认继续？(yes/NO): ").strip().lower() == "yes"
        if not ok:
            print("已取消。")
            return

    app = create_app()
    with app.app_context():
        db.drop_all()
        db.create_all()
    print("[reset-db] 重建完成。")


if __name__ == "__main__":
    main()
