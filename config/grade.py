"""점수 품질 / 부옵션 등급 / 배지 임계값 설정"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ScoreGrade(str, Enum):
    """5단계 품질 등급"""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    AVERAGE = "AVERAGE"
    POOR = "POOR"
    TERRIBLE = "TERRIBLE"


class StatBadge(str, Enum):
    """+15 환산 부옵션 배지"""
    RARE = "Rare"
    GOOD = "Good"
    MED = "Med"
    BAD = "Bad"


@dataclass(frozen=True)
class GradeThresholds:
    """등급 경계값 (내림차순 비교, 먼저 만족하는 등급 채택)"""
    excellent: float
    good: float
    average: float
    poor: float
    terrible: float = 0.0

    def scaled(self, multiplier: float) -> "GradeThresholds":
        """모든 경계값에 배율 적용"""
        return GradeThresholds(
            self.excellent * multiplier,
            self.good * multiplier,
            self.average * multiplier,
            self.poor * multiplier,
            self.terrible * multiplier,
        )


# 점수(Score / F-Score) 품질 경계값
DEFAULT_SCORE_QUALITY = GradeThresholds(85, 65, 50, 45, 0)


def _t(excellent: float, good: float, average: float, poor: float) -> GradeThresholds:
    return GradeThresholds(excellent, good, average, poor)


# 부옵션 이름별 등급 경계값 (게임 최대 롤 기준)
SUBSTAT_GRADE_THRESHOLDS: Mapping[str, GradeThresholds] = MappingProxyType({
    "Attack %": _t(20, 16, 12, 8),
    "Defense %": _t(20, 16, 12, 8),
    "Health %": _t(20, 16, 12, 9.5),
    "Crit %": _t(12, 10, 8, 6.5),
    "Crit Dmg %": _t(20, 15, 10, 6),
    "Effectiveness %": _t(20, 16, 12, 8),
    "Effect Resist %": _t(20, 16, 12, 8),
    "Speed": _t(20, 17, 15, 9),
    "Attack": _t(120, 100, 80, 70),
    # 원본 데이터 그대로 poor > average
    "Defense": _t(100, 80, 60, 75),
    "Health": _t(700, 400, 300, 250),
})

# 주옵션 종류별 등급 경계값 (키는 MainStatType 이름)
MAIN_STAT_GRADE_THRESHOLDS: Mapping[str, GradeThresholds] = MappingProxyType({
    "ATT_RATE": _t(65, 55, 45, 35),
    "DEF_RATE": _t(65, 55, 45, 35),
    "MAX_HP_RATE": _t(65, 55, 45, 35),
    "CRI": _t(12, 10, 8, 6.5),
    "CRI_DMG": _t(70, 60, 50, 40),
    "ACC": _t(65, 55, 45, 35),
    "RES": _t(65, 55, 45, 35),
    "SPEED": _t(20, 17, 15, 9),
    "ATT": _t(120, 100, 80, 70),
    "DEF": _t(100, 80, 60, 75),
    "MAX_HP": _t(700, 400, 300, 250),
})

# 알 수 없는 스탯용 보수적 경계값
GENERIC_GRADE_THRESHOLDS = _t(15, 10, 6, 3)

# +15 기준 배지 경계값 [Bad, Med, Good, Rare]
DEFAULT_STAT_THRESHOLDS: Mapping[str, tuple[float, ...]] = MappingProxyType({
    "Speed": (4, 8, 12, 18),
    "Crit %": (4, 8, 12, 16),
    "Crit Dmg %": (4, 8, 12, 20),
    "Attack %": (4, 8, 12, 16),
    "Defense %": (4, 8, 12, 16),
    "Health %": (4, 8, 12, 16),
    "Effectiveness %": (4, 8, 12, 16),
    "Effect Resist %": (4, 8, 12, 16),
    "Attack": (20, 40, 60, 90),
    "Defense": (10, 20, 30, 45),
    "Health": (50, 100, 150, 220),
})

BADGE_THRESHOLD_COUNT = 4
