"""
장비 점수 재계산 스크립트

가중치 변경 후 저장된 Score / F-Score와 품질 등급을 다시 계산합니다.

실행:
    python scripts/recalculate_scores.py            # 전체 사용자
    python scripts/recalculate_scores.py <user_id>  # 특정 사용자
"""
import asyncio
import logging
import os
import sys

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import close_db, init_db
from exceptions import RecalculationInProgressError
from service.scoring.recalculation_service import ScoreRecalculationService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


async def main(user_id: int | None):
    await init_db(generate_schemas=False)
    try:
        if user_id is None:
            result = await ScoreRecalculationService.calculate_all_gear_scores()
        else:
            result = await ScoreRecalculationService.calculate_user_gear_scores(user_id)
        logger.info(f"재계산 완료: {result.updated}개 갱신, {result.errors}개 실패")
    except RecalculationInProgressError as e:
        logger.error(e.message)
    finally:
        await close_db()


if __name__ == "__main__":
    target = int(sys.argv[1]) if len(sys.argv) > 1 else None
    asyncio.run(main(target))
