"""
ScoreRecalculationService

저장된 장비의 Score / F-Score 및 품질 등급을 일괄 재계산합니다.
한 장비의 실패는 기록만 하고 나머지 장비 처리를 계속합니다.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from tortoise.exceptions import BaseORMException

from config.grade import ScoreGrade
from config.scoring import DEFAULT_WEIGHTS, ScoringWeights
from exceptions import RecalculationInProgressError
from models import Gear
from models.repos import gear_repo, settings_repo
from service.scoring.grade_service import GradeService
from service.scoring.score_service import (
    GearSnapshot,
    ScoreSettings,
    calculate_f_score,
    calculate_score,
)

logger = logging.getLogger(__name__)

PROGRESS_LOG_INTERVAL = 100

# 전체 재계산은 프로세스 내에서 동시에 하나만 실행
_sweep_lock = asyncio.Lock()


@dataclass
class RecalculationResult:
    """재계산 결과 집계"""
    updated: int = 0
    errors: int = 0

    def merge(self, other: "RecalculationResult") -> None:
        self.updated += other.updated
        self.errors += other.errors

    def to_dict(self) -> dict:
        return {"updated": self.updated, "errors": self.errors}


def score_grade(score: float) -> Optional[ScoreGrade]:
    """양수 점수만 품질 등급 부여"""
    if score > 0:
        return GradeService.get_score_quality(score)
    return None


def compute_score_fields(
    snapshot: GearSnapshot,
    settings: Optional[ScoreSettings],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> dict:
    """
    장비에 저장할 점수 필드 계산

    Returns:
        {"score", "f_score", "score_grade", "f_score_grade"}
    """
    score = calculate_score(snapshot, weights)
    f_score = calculate_f_score(snapshot, settings, weights)
    return {
        "score": score,
        "f_score": f_score,
        "score_grade": score_grade(score),
        "f_score_grade": score_grade(f_score),
    }


class ScoreRecalculationService:
    """점수 일괄 재계산 비즈니스 로직"""

    @staticmethod
    async def _recalculate_gears(
        gears: list[Gear],
        settings: Optional[ScoreSettings],
        weights: ScoringWeights,
    ) -> RecalculationResult:
        result = RecalculationResult()
        for gear in gears:
            try:
                fields = compute_score_fields(GearSnapshot.from_model(gear), settings, weights)
                await gear_repo.update_gear_scores(gear, **fields)
                result.updated += 1
            except (BaseORMException, ValueError, TypeError, AttributeError) as e:
                logger.error(f"Error calculating scores for gear {gear.id}: {e}")
                result.errors += 1
                continue

            if result.updated % PROGRESS_LOG_INTERVAL == 0:
                logger.info(f"Processed {result.updated}/{len(gears)} gears...")
        return result

    @staticmethod
    async def calculate_user_gear_scores(
        user_id: int,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> RecalculationResult:
        """
        사용자 장비 점수 재계산

        Args:
            user_id: 대상 사용자 ID
            weights: 기본 가중치 테이블

        Returns:
            RecalculationResult (updated, errors)
        """
        logger.info(f"Starting score calculation for user {user_id}")

        settings_row = await settings_repo.get_settings(user_id)
        settings = ScoreSettings.from_model(settings_row)
        gears = await gear_repo.get_user_gears_with_substats(user_id)
        logger.info(f"Found {len(gears)} gears for user {user_id}")

        result = await ScoreRecalculationService._recalculate_gears(gears, settings, weights)
        logger.info(
            f"Score calculation complete for user {user_id}. "
            f"Updated: {result.updated}, Errors: {result.errors}"
        )
        return result

    @staticmethod
    async def calculate_all_gear_scores(
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> RecalculationResult:
        """
        전체 사용자 장비 점수 재계산 (관리자용)

        각 장비는 소유자의 설정으로 계산합니다.

        Raises:
            RecalculationInProgressError: 이미 전체 재계산이 진행 중
        """
        if _sweep_lock.locked():
            raise RecalculationInProgressError()

        async with _sweep_lock:
            logger.info("Starting score calculation for all gear...")
            user_ids = await gear_repo.get_gear_owner_ids()
            settings_by_user = await settings_repo.get_settings_by_user_ids(user_ids)

            total = RecalculationResult()
            for user_id in user_ids:
                settings = ScoreSettings.from_model(settings_by_user.get(user_id))
                gears = await gear_repo.get_user_gears_with_substats(user_id)
                total.merge(
                    await ScoreRecalculationService._recalculate_gears(gears, settings, weights)
                )

            logger.info(
                f"Score calculation complete. Updated: {total.updated}, Errors: {total.errors}"
            )
            return total
