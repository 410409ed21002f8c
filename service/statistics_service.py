"""
StatisticsService

대시보드용 장비/영웅 통계를 제공합니다.
"""
import asyncio
import logging
from collections import Counter
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from config.enhancement import ENHANCEMENT
from config.gear import GearRank, GearType
from config.grade import ScoreGrade
from config.scoring import DEFAULT_WEIGHTS
from models.repos import gear_repo, hero_repo, users_repo

logger = logging.getLogger(__name__)

EPIC_PLUS_RANKS = (GearRank.EPIC, GearRank.HEROIC)


def _token(value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        return value.value
    return value


def _distribution(values: Iterable[Any], keys: Iterable[Any] = ()) -> Dict[str, int]:
    """값별 개수 (keys에 있는 항목은 0이어도 포함)"""
    counts = Counter(_token(value) for value in values if value is not None)
    result = {_token(key): 0 for key in keys}
    result.update(counts)
    return result


def _summary(values: list[float]) -> Dict[str, float]:
    if not values:
        return {"avg": 0.0, "min": 0.0, "max": 0.0}
    return {
        "avg": round(sum(values) / len(values), DEFAULT_WEIGHTS.DECIMAL_PLACES),
        "min": min(values),
        "max": max(values),
    }


class StatisticsService:
    """통계 비즈니스 로직"""

    @staticmethod
    async def get_gear_stats(user_id: int) -> Dict[str, int]:
        """
        장비 기본 통계

        Returns:
            {"total", "equipped", "epic_plus", "max_enhanced"}
        """
        total, equipped, epic_plus, max_enhanced = await asyncio.gather(
            gear_repo.count_gears(user_id),
            gear_repo.count_gears(user_id, equipped=True),
            gear_repo.count_gears(user_id, rank__in=list(EPIC_PLUS_RANKS)),
            gear_repo.count_gears(user_id, enhance=ENHANCEMENT.MAX_LEVEL),
        )
        return {
            "total": total,
            "equipped": equipped,
            "epic_plus": epic_plus,
            "max_enhanced": max_enhanced,
        }

    @staticmethod
    async def get_hero_stats(user_id: int) -> Dict[str, Any]:
        """
        영웅 통계

        Returns:
            {"total", "by_element", "by_class", "by_rarity"}
            메타데이터가 없는 영웅은 분포에서 제외됩니다.
        """
        rows = await hero_repo.get_hero_field_values(
            user_id, "element", "hero_class", "rarity"
        )
        return {
            "total": len(rows),
            "by_element": _distribution(row[0] for row in rows),
            "by_class": _distribution(row[1] for row in rows),
            "by_rarity": _distribution(row[2] for row in rows),
        }

    @staticmethod
    async def get_rank_distribution(user_id: int) -> Dict[str, int]:
        rows = await gear_repo.get_gear_field_values(user_id, "rank")
        return _distribution((row[0] for row in rows), GearRank)

    @staticmethod
    async def get_type_distribution(user_id: int) -> Dict[str, int]:
        rows = await gear_repo.get_gear_field_values(user_id, "gear_type")
        return _distribution((row[0] for row in rows), GearType)

    @staticmethod
    async def get_enhance_distribution(user_id: int) -> Dict[int, int]:
        """강화 단계별 장비 수 (0 ~ +15 모두 포함)"""
        rows = await gear_repo.get_gear_field_values(user_id, "enhance")
        return _distribution(
            (row[0] for row in rows), range(ENHANCEMENT.MAX_LEVEL + 1)
        )

    @staticmethod
    async def get_score_stats(user_id: int) -> Dict[str, Any]:
        """
        점수 통계

        점수가 0인 장비(미계산)는 평균/최소/최대에서 제외합니다.

        Returns:
            {"score": {avg, min, max}, "f_score": {avg, min, max},
             "score_grades": {...}, "f_score_grades": {...}}
        """
        rows = await gear_repo.get_gear_field_values(
            user_id, "score", "f_score", "score_grade", "f_score_grade"
        )
        return {
            "score": _summary([row[0] for row in rows if row[0]]),
            "f_score": _summary([row[1] for row in rows if row[1]]),
            "score_grades": _distribution((row[2] for row in rows), ScoreGrade),
            "f_score_grades": _distribution((row[3] for row in rows), ScoreGrade),
        }

    @staticmethod
    async def get_dashboard_stats(user_id: int) -> Dict[str, Any]:
        """
        대시보드 통계 일괄 조회

        Raises:
            UserNotFoundError: 사용자가 없음
        """
        await users_repo.get_user_or_raise(user_id)

        gears, heroes, ranks, types, enhance, scores = await asyncio.gather(
            StatisticsService.get_gear_stats(user_id),
            StatisticsService.get_hero_stats(user_id),
            StatisticsService.get_rank_distribution(user_id),
            StatisticsService.get_type_distribution(user_id),
            StatisticsService.get_enhance_distribution(user_id),
            StatisticsService.get_score_stats(user_id),
        )
        logger.debug(f"Dashboard stats for user {user_id}: {gears['total']} gears, {heroes['total']} heroes")
        return {
            "gears": gears,
            "heroes": heroes,
            "rank_distribution": ranks,
            "type_distribution": types,
            "enhance_distribution": enhance,
            "scores": scores,
        }
