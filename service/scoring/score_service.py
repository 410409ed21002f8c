"""
ScoreService

장비 점수 계산을 담당합니다.

- Score: 고정 가중치, 부옵션만 합산 (기준 지표)
- F-Score: 사용자 가중치 우선, 주옵션 포함 여부 선택 가능

두 함수 모두 입력 스냅샷과 가중치 테이블만으로 결과가 결정되며 (순수 함수),
NaN이 되는 값은 0으로 취급하고 결과는 소수점 둘째 자리로 반올림합니다.
"""
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from config.gear import MainStatType, StatCategory
from config.scoring import DEFAULT_WEIGHTS, ScoringWeights

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class SubstatSnapshot:
    """점수 계산용 부옵션 값"""
    stat_name: Optional[str]
    stat_value: Any
    category: Optional[StatCategory] = None


@dataclass(frozen=True)
class GearSnapshot:
    """점수 계산용 장비 값"""
    main_stat_type: Any
    main_stat_value: Any
    substats: tuple[SubstatSnapshot, ...] = ()

    @classmethod
    def from_model(cls, gear) -> "GearSnapshot":
        """
        저장된 Gear로부터 스냅샷 생성

        gear.substats 와 각 substat.stat_type 이 prefetch 되어 있어야 합니다.
        """
        substats = tuple(
            SubstatSnapshot(
                stat_name=substat.stat_type.stat_name,
                stat_value=substat.stat_value,
                category=substat.stat_type.stat_category,
            )
            for substat in gear.substats
        )
        return cls(gear.main_stat_type, gear.main_stat_value, substats)


@dataclass(frozen=True)
class ScoreSettings:
    """F-Score 사용자 설정 (희소 오버라이드)"""
    include_main_stat: bool = True
    substat_weights: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    main_stat_weights: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_model(cls, settings) -> "ScoreSettings":
        if settings is None:
            return cls()
        return cls(
            include_main_stat=bool(settings.f_score_include_main_stat),
            substat_weights=MappingProxyType(dict(settings.f_score_substat_weights or {})),
            main_stat_weights=MappingProxyType(dict(settings.f_score_main_stat_weights or {})),
        )


def to_number(value: Any) -> Optional[float]:
    """숫자 변환 (None / 문자열 / NaN / 무한대 → None)"""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def round_score(value: float, places: int = DEFAULT_WEIGHTS.DECIMAL_PLACES) -> float:
    """소수점 반올림 (0.5는 올림)"""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def main_stat_key(main_stat_type: Any) -> str:
    """주옵션 가중치 맵 키 (소문자)"""
    if isinstance(main_stat_type, MainStatType):
        return main_stat_type.value
    return str(main_stat_type or "").lower()


def fallback_weight(
    stat_name: str,
    category: Optional[StatCategory],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    기본 테이블에 없는 부옵션의 분류 기반 가중치

    분류를 모르면 이름에 "%"가 있는지로 판단합니다.
    """
    if category is None:
        category = StatCategory.PERCENTAGE if "%" in stat_name else StatCategory.FLAT

    if category == StatCategory.PERCENTAGE:
        if "Crit" in stat_name:
            return weights.PERCENT_CRIT_WEIGHT
        if "Speed" in stat_name:
            return weights.PERCENT_SPEED_WEIGHT
        if "Attack" in stat_name or "Health" in stat_name or "Defense" in stat_name:
            return weights.PERCENT_CORE_WEIGHT
        return weights.PERCENT_OTHER_WEIGHT

    if "Speed" in stat_name:
        return weights.FLAT_SPEED_WEIGHT
    if "Attack" in stat_name:
        return weights.FLAT_ATTACK_WEIGHT
    return weights.FLAT_OTHER_WEIGHT


def default_substat_weight(
    stat_name: str,
    category: Optional[StatCategory] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    weight = weights.substat_weights.get(stat_name)
    if weight is not None:
        return weight
    return fallback_weight(stat_name, category, weights)


def _substat_total(
    gear: GearSnapshot,
    overrides: Mapping[str, Any],
    weights: ScoringWeights,
) -> float:
    total = 0.0
    for substat in gear.substats:
        if not substat.stat_name:
            continue
        value = to_number(substat.stat_value)
        if value is None:
            continue

        weight = to_number(overrides.get(substat.stat_name))
        if weight is None:
            weight = default_substat_weight(substat.stat_name, substat.category, weights)
        total += value * weight
    return total


def calculate_score(gear: GearSnapshot, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """
    Score 계산 (고정 가중치, 부옵션만)

    Args:
        gear: 장비 스냅샷
        weights: 기본 가중치 테이블

    Returns:
        소수점 둘째 자리 점수 (주옵션은 절대 포함하지 않음)
    """
    return round_score(_substat_total(gear, _EMPTY, weights), weights.DECIMAL_PLACES)


def calculate_f_score(
    gear: GearSnapshot,
    settings: Optional[ScoreSettings] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    F-Score 계산 (사용자 가중치 우선)

    Args:
        gear: 장비 스냅샷
        settings: 사용자 설정 (None이면 기본값, 주옵션 포함)
        weights: 기본 가중치 테이블

    Returns:
        소수점 둘째 자리 점수
    """
    settings = settings or ScoreSettings()
    total = _substat_total(gear, settings.substat_weights, weights)

    if settings.include_main_stat:
        value = to_number(gear.main_stat_value)
        key = main_stat_key(gear.main_stat_type)
        weight = to_number(settings.main_stat_weights.get(key))
        if weight is None:
            weight = weights.main_stat_weights.get(key)
        if value is not None and weight is not None:
            total += value * weight

    return round_score(total, weights.DECIMAL_PLACES)
