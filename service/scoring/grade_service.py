"""
GradeService

부옵션 배지, 부옵션 등급, 점수 품질 등급 계산을 담당합니다.

강화 단계 환산은 두 가지 방식이 공존합니다.
- 배지: 연속 비율 (강화 + 3) / 18 로 관측값을 +15 환산값으로 나눔
- 등급: 계단식 배율 (12↑ 1.0, 9↑ 0.9, 6↑ 0.8, 그 외 0.7) 을 경계값에 곱함
"""
import logging
import math
from typing import Any, Mapping, Optional, Sequence

from config.enhancement import ENHANCEMENT
from config.gear import FRACTION_MAIN_STATS, MainStatType
from config.grade import (
    BADGE_THRESHOLD_COUNT,
    DEFAULT_SCORE_QUALITY,
    DEFAULT_STAT_THRESHOLDS,
    GENERIC_GRADE_THRESHOLDS,
    MAIN_STAT_GRADE_THRESHOLDS,
    SUBSTAT_GRADE_THRESHOLDS,
    GradeThresholds,
    ScoreGrade,
    StatBadge,
)

logger = logging.getLogger(__name__)

StatThresholdTable = Mapping[str, Sequence[float]]


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _clamp_enhance(enhance: Any) -> int:
    number = _as_number(enhance)
    if number is None:
        return 0
    return max(0, min(ENHANCEMENT.MAX_LEVEL, int(number)))


def _classify(value: float, thresholds: GradeThresholds) -> ScoreGrade:
    if value >= thresholds.excellent:
        return ScoreGrade.EXCELLENT
    if value >= thresholds.good:
        return ScoreGrade.GOOD
    if value >= thresholds.average:
        return ScoreGrade.AVERAGE
    if value >= thresholds.poor:
        return ScoreGrade.POOR
    return ScoreGrade.TERRIBLE


def _main_stat_type_for(stat_name: str) -> Optional[MainStatType]:
    try:
        return MainStatType[stat_name.upper()]
    except KeyError:
        return None


class GradeService:
    """등급/배지 비즈니스 로직"""

    # =========================================================================
    # 배지 (연속 비율 환산)
    # =========================================================================

    @staticmethod
    def badge_ratio(enhance: Any) -> float:
        """
        강화 단계별 배지 환산 비율

        Args:
            enhance: 강화 단계 (0~15 범위로 보정)

        Returns:
            +15에서 1.0, 그 미만은 (강화 + 3) / 18
        """
        level = _clamp_enhance(enhance)
        if level >= ENHANCEMENT.MAX_LEVEL:
            return 1.0
        return (level + ENHANCEMENT.BADGE_RATIO_OFFSET) / ENHANCEMENT.BADGE_RATIO_DIVISOR

    @staticmethod
    def scale_for_badge(stat_value: float, enhance: Any) -> float:
        """관측값을 +15 환산값으로 변환"""
        return stat_value / GradeService.badge_ratio(enhance)

    @staticmethod
    def resolve_stat_thresholds(
        overrides: Optional[Mapping[str, Any]] = None,
        defaults: StatThresholdTable = DEFAULT_STAT_THRESHOLDS,
    ) -> dict[str, tuple[float, ...]]:
        """
        사용자 배지 경계값을 기본값 위에 병합

        사용자 값은 [t1..t4] 리스트 또는 {"plus15": [t1..t4]} 형태를 허용하며,
        비어 있거나 형식이 맞지 않는 항목은 무시합니다.

        Args:
            overrides: 사용자 설정의 substat_thresholds
            defaults: 기본 경계값 테이블

        Returns:
            {스탯 이름: 경계값 튜플}
        """
        merged = {name: tuple(values) for name, values in defaults.items()}
        for stat_name, raw in (overrides or {}).items():
            values = raw.get("plus15") if isinstance(raw, Mapping) else raw
            if not isinstance(values, (list, tuple)) or not values:
                continue
            numbers = [_as_number(v) for v in values]
            if any(n is None for n in numbers):
                logger.warning(f"Ignoring non-numeric thresholds for {stat_name}: {values}")
                continue
            merged[stat_name] = tuple(numbers)
        return merged

    @staticmethod
    def get_stat_badge(
        stat_name: str,
        stat_value: Any,
        enhance: Any,
        thresholds: StatThresholdTable = DEFAULT_STAT_THRESHOLDS,
    ) -> Optional[StatBadge]:
        """
        부옵션 배지 계산

        Args:
            stat_name: 부옵션 표시 이름
            stat_value: 관측값
            enhance: 장비 강화 단계
            thresholds: 경계값 테이블 (스탯당 정확히 4개)

        Returns:
            Rare / Good / Med / Bad, 최하 경계 미만이거나 경계값이 없으면 None
        """
        bounds = thresholds.get(stat_name)
        if not bounds or len(bounds) != BADGE_THRESHOLD_COUNT:
            return None

        value = _as_number(stat_value)
        if value is None:
            return None

        t1, t2, t3, t4 = bounds
        scaled = GradeService.scale_for_badge(value, enhance)

        if scaled >= t4:
            return StatBadge.RARE
        if scaled >= t3:
            return StatBadge.GOOD
        if scaled >= t2:
            return StatBadge.MED
        if scaled >= t1:
            return StatBadge.BAD
        return None

    # =========================================================================
    # 점수 품질
    # =========================================================================

    @staticmethod
    def get_score_quality(
        score: Any,
        thresholds: GradeThresholds = DEFAULT_SCORE_QUALITY,
    ) -> ScoreGrade:
        """
        Score / F-Score 품질 등급 (85 / 65 / 50 / 45 / 0)

        Args:
            score: 점수
            thresholds: 품질 경계값

        Returns:
            ScoreGrade (숫자가 아니면 TERRIBLE)
        """
        value = _as_number(score)
        if value is None:
            return ScoreGrade.TERRIBLE
        return _classify(value, thresholds)

    # =========================================================================
    # 부옵션 / 주옵션 등급 (계단식 배율)
    # =========================================================================

    @staticmethod
    def grade_multiplier(enhance: Any) -> float:
        """강화 단계별 등급 경계값 배율"""
        level = _clamp_enhance(enhance)
        for min_level, multiplier in ENHANCEMENT.GRADE_STEPS:
            if level >= min_level:
                return multiplier
        return ENHANCEMENT.GRADE_MIN_MULTIPLIER

    @staticmethod
    def get_grade_thresholds(stat_name: str, enhance: Any = None) -> GradeThresholds:
        """
        스탯 이름에 해당하는 등급 경계값

        부옵션 표시 이름("Health %")을 먼저 찾고,
        없으면 주옵션 종류("ATT_RATE" / "att_rate")로 찾습니다.

        Args:
            stat_name: 부옵션 표시 이름 또는 주옵션 종류
            enhance: 강화 단계 (None이면 배율 미적용)

        Returns:
            GradeThresholds
        """
        base = SUBSTAT_GRADE_THRESHOLDS.get(stat_name)
        if base is None:
            main_type = _main_stat_type_for(stat_name)
            if main_type is not None:
                base = MAIN_STAT_GRADE_THRESHOLDS[main_type.name]
        if base is None:
            base = GENERIC_GRADE_THRESHOLDS

        if enhance is None:
            return base
        return base.scaled(GradeService.grade_multiplier(enhance))

    @staticmethod
    def normalize_grade_value(stat_value: float, stat_name: str) -> float:
        """
        소수로 저장된 주옵션 값(0.55)을 퍼센트(55)로 변환

        비율형 주옵션(ATT_RATE, DEF_RATE, MAX_HP_RATE, CRI_DMG, ACC, RES)이면서
        값이 1 이하일 때만 변환합니다. 부옵션 이름("Attack %")은 변환하지 않습니다.
        """
        if "%" in stat_name:
            return stat_value
        main_type = _main_stat_type_for(stat_name)
        if main_type in FRACTION_MAIN_STATS and abs(stat_value) <= 1:
            return stat_value * 100
        return stat_value

    @staticmethod
    def get_substat_grade(
        stat_value: Any,
        stat_name: str,
        enhance: Any = None,
    ) -> ScoreGrade:
        """
        스탯 값의 5단계 등급

        Args:
            stat_value: 관측값
            stat_name: 부옵션 표시 이름 또는 주옵션 종류
            enhance: 강화 단계 (None이면 +15 기준)

        Returns:
            ScoreGrade (숫자가 아니면 TERRIBLE)
        """
        value = _as_number(stat_value)
        if value is None:
            return ScoreGrade.TERRIBLE

        value = GradeService.normalize_grade_value(value, stat_name)
        return _classify(value, GradeService.get_grade_thresholds(stat_name, enhance))
