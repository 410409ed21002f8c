"""
참조 데이터 시딩 스크립트

스탯 종류와 세트 효과 기본 데이터를 생성합니다. 여러 번 실행해도 안전합니다.

실행: python scripts/seed_reference_data.py
"""
import asyncio
import logging
import os
import sys

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import close_db, init_db
from models.repos.reference_repo import seed_reference_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


async def main():
    await init_db()
    try:
        created_stats, created_sets = await seed_reference_data()
        logger.info(f"시딩 완료: 스탯 종류 {created_stats}개, 세트 {created_sets}개 생성")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
