"""
GearBoard 설정 상수

점수 가중치, 등급 임계값, 게임 데이터 규칙 등 모든 매직 넘버를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
"""
from config.gear import (
    GearType, GearRank, MainStatType, StatCategory,
    MAIN_STAT_WHITELIST, MAIN_STAT_TO_STAT_NAME, FRACTION_MAIN_STATS,
    is_main_stat_allowed,
)
from config.hero import (
    HeroElement, HeroClass, HeroRarity, HeroConfig, HERO,
    STARS_TO_RARITY, CODE_DIGIT_TO_ELEMENT, CODE_BAND_TO_CLASS,
    NAME_KEYWORD_TO_ELEMENT,
)
from config.scoring import ScoringWeights, DEFAULT_WEIGHTS
from config.grade import (
    ScoreGrade, StatBadge, GradeThresholds,
    DEFAULT_SCORE_QUALITY, SUBSTAT_GRADE_THRESHOLDS, MAIN_STAT_GRADE_THRESHOLDS,
    GENERIC_GRADE_THRESHOLDS, DEFAULT_STAT_THRESHOLDS, BADGE_THRESHOLD_COUNT,
)
from config.enhancement import EnhancementConfig, ENHANCEMENT
from config.importer import ImportConfig, IMPORT
from config.reference_data import (
    StatTypeDef, GearSetDef, STAT_TYPE_DEFS, GEAR_SET_DEFS,
    main_stat_gear_types, substat_gear_types,
)

__all__ = [
    # gear
    "GearType", "GearRank", "MainStatType", "StatCategory",
    "MAIN_STAT_WHITELIST", "MAIN_STAT_TO_STAT_NAME", "FRACTION_MAIN_STATS",
    "is_main_stat_allowed",
    # hero
    "HeroElement", "HeroClass", "HeroRarity", "HeroConfig", "HERO",
    "STARS_TO_RARITY", "CODE_DIGIT_TO_ELEMENT", "CODE_BAND_TO_CLASS",
    "NAME_KEYWORD_TO_ELEMENT",
    # scoring
    "ScoringWeights", "DEFAULT_WEIGHTS",
    # grade
    "ScoreGrade", "StatBadge", "GradeThresholds",
    "DEFAULT_SCORE_QUALITY", "SUBSTAT_GRADE_THRESHOLDS", "MAIN_STAT_GRADE_THRESHOLDS",
    "GENERIC_GRADE_THRESHOLDS", "DEFAULT_STAT_THRESHOLDS", "BADGE_THRESHOLD_COUNT",
    # enhancement
    "EnhancementConfig", "ENHANCEMENT",
    # importer
    "ImportConfig", "IMPORT",
    # reference data
    "StatTypeDef", "GearSetDef", "STAT_TYPE_DEFS", "GEAR_SET_DEFS",
    "main_stat_gear_types", "substat_gear_types",
]
