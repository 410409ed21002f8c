"""장비 점수(Score / F-Score) 가중치 설정"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from config.gear import MainStatType


def _frozen(table: dict) -> Mapping:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class ScoringWeights:
    """
    점수 계산용 가중치 테이블

    프로세스 시작 시 한 번 생성되어 점수 함수에 주입됩니다.
    테이블은 읽기 전용 매핑입니다.
    """

    substat_weights: Mapping[str, float] = field(default_factory=lambda: _frozen({
        "Speed": 2.0,
        "Crit %": 1.6,
        "Crit Dmg %": 1.4,
        "Attack %": 1.0,
        "Defense %": 1.0,
        "Health %": 1.0,
        "Effectiveness %": 0.8,
        "Effect Resist %": 0.8,
        "Attack": 0.15,
        "Defense": 0.1,
        "Health": 0.1,
    }))
    """부옵션 표시 이름 → 기본 가중치"""

    main_stat_weights: Mapping[str, float] = field(default_factory=lambda: _frozen({
        MainStatType.ATT.value: 0.15,
        MainStatType.DEF.value: 0.1,
        MainStatType.MAX_HP.value: 0.1,
        MainStatType.ATT_RATE.value: 1.0,
        MainStatType.DEF_RATE.value: 1.0,
        MainStatType.MAX_HP_RATE.value: 1.0,
        MainStatType.CRI.value: 1.6,
        MainStatType.CRI_DMG.value: 1.4,
        MainStatType.SPEED.value: 2.0,
        MainStatType.ACC.value: 0.8,
        MainStatType.RES.value: 0.8,
    }))
    """주옵션 키(소문자) → 기본 가중치"""

    PERCENT_CRIT_WEIGHT: float = 1.6
    """알 수 없는 % 부옵션: 이름에 Crit 포함"""

    PERCENT_SPEED_WEIGHT: float = 2.0
    """알 수 없는 % 부옵션: 이름에 Speed 포함"""

    PERCENT_CORE_WEIGHT: float = 1.0
    """알 수 없는 % 부옵션: Attack / Health / Defense 포함"""

    PERCENT_OTHER_WEIGHT: float = 0.8
    """알 수 없는 % 부옵션: 그 외"""

    FLAT_SPEED_WEIGHT: float = 2.0
    """알 수 없는 고정 부옵션: Speed 포함"""

    FLAT_ATTACK_WEIGHT: float = 0.15
    """알 수 없는 고정 부옵션: Attack 포함"""

    FLAT_OTHER_WEIGHT: float = 0.1
    """알 수 없는 고정 부옵션: 그 외"""

    DECIMAL_PLACES: int = 2
    """점수 반올림 자릿수"""


DEFAULT_WEIGHTS = ScoringWeights()
