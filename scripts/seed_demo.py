"""生成演示数据（Demo）。
使用 Faker 批量生成：物料、原料以及物料-原料关联。
示例：
  python scripts/seed_demo.py --materials 20 --raw-materials 50 --max-links 4
"""
from __future__ import annotations
import argparse
import random
from pathlib import Path
import sys
from faker import Faker

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory import create_app  # noqa: E402
from inventory.extensions import db  # noqa: E402
from inventory.models import MaterialRawMaterials, RawMaterial  # noqa: E402
from inventory.schemas import MaterialRequestSchema  # noqa: E402
from inventory.services import MaterialService  # noqa: E402


def gen_demo(materials: int, raw_materials: int, max_links: int) -> None:
    fake = Faker()
    app = create_app()
    with app.app_context():
        # 原料
        raws = []
        for i in range(raw_materials):
            r = RawMaterial(
                rawmaterialid=f"RM-{i+1:04d}",
                name=fake.unique.word().title(),
                description=fake.sentence(),
                price=round(random.uniform(0.5, 50), 2),
                quantity=random.randint(0, 1000),
                vendor=fake.company(),
            )
            raws.append(db.session.merge(r))
        db.session.commit()

        # 物料（经由服务层创建，写入审计日志）
        service = MaterialService.default()
        for i in range(materials):
            req = MaterialRequestSchema(
                materialid=f"M-{i+1:04d}",
                name=fake.unique.word().title(),
                description=fake.sentence(),
                price=round(random.uniform(10, 500), 2),
                quantity=random.randint(0, 200),
                vendor=fake.company(),
            )
            m = service.create_material(req)
            for r in random.sample(raws, k=min(len(raws), random.randint(1, max_links))):
                db.session.merge(MaterialRawMaterials(materialid=m.materialid, rawmaterialid=r.rawmaterialid))
        db.session.commit()
        print(f"已生成 {materials} 个物料，{raw_materials} 个原料")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--materials", type=int, default=20)
    ap.add_argument("--raw-materials", type=int, default=50)
    ap.add_argument("--max-links", type=int, default=4)
    args = ap.parse_args()
    gen_demo(args.materials, args.raw_materials, args.max_links)
