"""
Fribbels 익스포트 임포트 스크립트

실행: python scripts/import_export.py <username> <export.json>

사용자가 없으면 새로 만든 뒤 임포트합니다.
"""
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import close_db, init_db
from models.repos import users_repo
from models.repos.reference_repo import seed_reference_data
from service.importer.import_service import ImportService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


async def main(username: str, export_path: Path):
    await init_db()
    try:
        await seed_reference_data()
        user = await users_repo.find_user_by_username(username)
        if user is None:
            user = await users_repo.create_user(username)
            logger.info(f"새 사용자 생성: {username} (ID: {user.id})")

        result = await ImportService.process_upload(user.id, export_path.read_bytes())
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    finally:
        await close_db()


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("사용법: python scripts/import_export.py <username> <export.json>")
        sys.exit(1)
    asyncio.run(main(sys.argv[1], Path(sys.argv[2])))
