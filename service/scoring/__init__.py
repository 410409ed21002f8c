"""
점수 시스템 서비스 모듈

Score / F-Score 계산, 등급/배지 판정, 저장된 점수 재계산을 담당합니다.
"""
from service.scoring.grade_service import GradeService
from service.scoring.recalculation_service import RecalculationResult, ScoreRecalculationService
from service.scoring.score_service import (
    GearSnapshot,
    ScoreSettings,
    SubstatSnapshot,
    calculate_f_score,
    calculate_score,
)

__all__ = [
    "GradeService",
    "RecalculationResult",
    "ScoreRecalculationService",
    "GearSnapshot",
    "ScoreSettings",
    "SubstatSnapshot",
    "calculate_f_score",
    "calculate_score",
]
