"""
SettingsService

사용자 점수 설정(F-Score 가중치, 배지 경계값) 조회/저장을 담당합니다.
"""
import logging
import math
from typing import Any, Mapping, Optional

from config.gear import MainStatType
from config.grade import BADGE_THRESHOLD_COUNT
from exceptions import InvalidSettingsError
from models import UserSettings
from models.repos import settings_repo, users_repo
from service.scoring.grade_service import GradeService
from service.scoring.recalculation_service import (
    RecalculationResult,
    ScoreRecalculationService,
)
from service.scoring.score_service import ScoreSettings

logger = logging.getLogger(__name__)

_MAIN_STAT_KEYS = frozenset(stat_type.value for stat_type in MainStatType)


def _validate_weight(field_name: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSettingsError(field_name, f"{key}: weight must be a number")
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidSettingsError(field_name, f"{key}: weight must be a finite non-negative number")
    return float(value)


def normalize_substat_weights(weights: Mapping[str, Any]) -> dict[str, float]:
    """부옵션 가중치 검증"""
    return {
        str(name): _validate_weight("f_score_substat_weights", str(name), value)
        for name, value in weights.items()
    }


def normalize_main_stat_weights(weights: Mapping[str, Any]) -> dict[str, float]:
    """주옵션 가중치 검증 (키는 소문자 주옵션 종류)"""
    normalized = {}
    for key, value in weights.items():
        lowered = str(key).lower()
        if lowered not in _MAIN_STAT_KEYS:
            raise InvalidSettingsError("f_score_main_stat_weights", f"unknown main stat '{key}'")
        normalized[lowered] = _validate_weight("f_score_main_stat_weights", lowered, value)
    return normalized


def normalize_thresholds(thresholds: Mapping[str, Any]) -> dict[str, dict[str, list[float]]]:
    """
    배지 경계값 검증

    각 스탯은 오름차순 숫자 4개여야 하며 {"plus15": [...]} 형태로 저장합니다.
    빈 목록은 "기본값 사용"으로 보고 제거합니다.
    """
    normalized = {}
    for name, raw in thresholds.items():
        values = raw.get("plus15") if isinstance(raw, Mapping) else raw
        if values is None or (isinstance(values, (list, tuple)) and not values):
            continue
        if not isinstance(values, (list, tuple)) or len(values) != BADGE_THRESHOLD_COUNT:
            raise InvalidSettingsError(
                "substat_thresholds", f"{name}: exactly {BADGE_THRESHOLD_COUNT} values required"
            )
        numbers = [_validate_weight("substat_thresholds", str(name), v) for v in values]
        if any(a > b for a, b in zip(numbers, numbers[1:])):
            raise InvalidSettingsError("substat_thresholds", f"{name}: values must be ascending")
        normalized[str(name)] = {"plus15": numbers}
    return normalized


class SettingsService:
    """사용자 점수 설정 비즈니스 로직"""

    @staticmethod
    async def get_settings(user_id: int) -> UserSettings:
        """
        사용자 설정 조회 (없으면 기본값으로 생성)

        Raises:
            UserNotFoundError: 사용자가 없음
        """
        await users_repo.get_user_or_raise(user_id)
        return await settings_repo.get_or_create_settings(user_id)

    @staticmethod
    async def save_settings(
        user_id: int,
        include_main_stat: Optional[bool] = None,
        substat_weights: Optional[Mapping[str, Any]] = None,
        main_stat_weights: Optional[Mapping[str, Any]] = None,
        substat_thresholds: Optional[Mapping[str, Any]] = None,
    ) -> UserSettings:
        """
        사용자 설정 저장 (None인 항목은 변경하지 않음)

        Args:
            user_id: 대상 사용자 ID
            include_main_stat: F-Score에 주옵션 포함 여부
            substat_weights: 부옵션 이름 → 가중치
            main_stat_weights: 주옵션 키 → 가중치
            substat_thresholds: 부옵션 이름 → 경계값 4개

        Returns:
            저장된 UserSettings

        Raises:
            UserNotFoundError: 사용자가 없음
            InvalidSettingsError: 값이 올바르지 않음
        """
        await users_repo.get_user_or_raise(user_id)

        values: dict[str, Any] = {}
        if include_main_stat is not None:
            values["f_score_include_main_stat"] = bool(include_main_stat)
        if substat_weights is not None:
            values["f_score_substat_weights"] = normalize_substat_weights(substat_weights)
        if main_stat_weights is not None:
            values["f_score_main_stat_weights"] = normalize_main_stat_weights(main_stat_weights)
        if substat_thresholds is not None:
            values["substat_thresholds"] = normalize_thresholds(substat_thresholds)

        settings = await settings_repo.update_settings(user_id, values)
        logger.info(f"User {user_id} saved settings: {sorted(values.keys())}")
        return settings

    @staticmethod
    async def reset_to_defaults(user_id: int) -> UserSettings:
        """사용자 설정을 기본값으로 초기화"""
        await users_repo.get_user_or_raise(user_id)
        settings = await settings_repo.update_settings(user_id, {
            "f_score_include_main_stat": True,
            "f_score_substat_weights": {},
            "f_score_main_stat_weights": {},
            "substat_thresholds": {},
        })
        logger.info(f"User {user_id} reset settings to defaults")
        return settings

    @staticmethod
    async def get_score_settings(user_id: int) -> ScoreSettings:
        """점수 계산용 설정 (행이 없으면 기본값)"""
        return ScoreSettings.from_model(await settings_repo.get_settings(user_id))

    @staticmethod
    async def get_effective_thresholds(user_id: int) -> dict[str, tuple[float, ...]]:
        """기본값 위에 사용자 값을 병합한 배지 경계값"""
        settings = await settings_repo.get_settings(user_id)
        overrides = settings.substat_thresholds if settings else None
        return GradeService.resolve_stat_thresholds(overrides)

    @staticmethod
    async def recalculate(user_id: int) -> RecalculationResult:
        """현재 설정으로 사용자 장비 점수 재계산"""
        await users_repo.get_user_or_raise(user_id)
        return await ScoreRecalculationService.calculate_user_gear_scores(user_id)
