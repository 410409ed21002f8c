"""강화 단계 환산 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EnhancementConfig:
    """강화 설정"""

    MAX_LEVEL: int = 15
    """최대 강화 레벨"""

    BADGE_RATIO_OFFSET: int = 3
    """배지 환산 비율 분자 보정값 ((강화 + 3) / 18)"""

    BADGE_RATIO_DIVISOR: int = 18
    """배지 환산 비율 분모"""

    GRADE_STEPS: tuple[tuple[int, float], ...] = (
        (12, 1.0),
        (9, 0.9),
        (6, 0.8),
    )
    """부옵션 등급 경계값 배율 (강화 하한, 배율) - 내림차순"""

    GRADE_MIN_MULTIPLIER: float = 0.7
    """+6 미만 배율"""


ENHANCEMENT = EnhancementConfig()
