"""장비 분류 및 주옵션 규칙 설정"""
from enum import Enum


class GearType(str, Enum):
    """장비 부위 (6종)"""
    WEAPON = "WEAPON"
    HELM = "HELM"
    ARMOR = "ARMOR"
    NECK = "NECK"
    RING = "RING"
    BOOTS = "BOOTS"


class GearRank(str, Enum):
    """장비 등급 (일반 → 영웅)"""
    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"
    EPIC = "EPIC"
    HEROIC = "HEROIC"


class MainStatType(str, Enum):
    """
    주옵션 종류 (11종)

    값은 익스포트 파일의 토큰과 동일한 소문자이며,
    F-Score 주옵션 가중치 맵의 키로도 사용됩니다.
    """
    ATT = "att"
    DEF = "def"
    MAX_HP = "max_hp"
    ATT_RATE = "att_rate"
    DEF_RATE = "def_rate"
    MAX_HP_RATE = "max_hp_rate"
    CRI = "cri"
    CRI_DMG = "cri_dmg"
    SPEED = "speed"
    ACC = "acc"
    RES = "res"


class StatCategory(str, Enum):
    """부옵션 수치 분류"""
    FLAT = "FLAT"
    PERCENTAGE = "PERCENTAGE"


_COMMON_MAIN_STATS = (
    MainStatType.ATT,
    MainStatType.DEF,
    MainStatType.MAX_HP,
    MainStatType.ATT_RATE,
    MainStatType.MAX_HP_RATE,
    MainStatType.DEF_RATE,
)

# 부위별 허용 주옵션
MAIN_STAT_WHITELIST: dict[GearType, tuple[MainStatType, ...]] = {
    GearType.WEAPON: (MainStatType.ATT,),
    GearType.HELM: (MainStatType.MAX_HP,),
    GearType.ARMOR: (MainStatType.DEF,),
    GearType.NECK: _COMMON_MAIN_STATS + (MainStatType.CRI, MainStatType.CRI_DMG),
    GearType.RING: _COMMON_MAIN_STATS + (MainStatType.ACC, MainStatType.RES),
    GearType.BOOTS: _COMMON_MAIN_STATS + (MainStatType.SPEED,),
}

# 주옵션 → 부옵션 표시 이름 (같은 이름의 부옵션은 함께 붙을 수 없음)
MAIN_STAT_TO_STAT_NAME: dict[MainStatType, str] = {
    MainStatType.ATT: "Attack",
    MainStatType.DEF: "Defense",
    MainStatType.MAX_HP: "Health",
    MainStatType.ATT_RATE: "Attack %",
    MainStatType.DEF_RATE: "Defense %",
    MainStatType.MAX_HP_RATE: "Health %",
    MainStatType.CRI: "Crit %",
    MainStatType.CRI_DMG: "Crit Dmg %",
    MainStatType.SPEED: "Speed",
    MainStatType.ACC: "Effectiveness %",
    MainStatType.RES: "Effect Resist %",
}

# 소수(0.65 = 65%)로 저장될 수 있는 주옵션
FRACTION_MAIN_STATS: frozenset[MainStatType] = frozenset({
    MainStatType.ATT_RATE,
    MainStatType.DEF_RATE,
    MainStatType.MAX_HP_RATE,
    MainStatType.CRI_DMG,
    MainStatType.ACC,
    MainStatType.RES,
})


def is_main_stat_allowed(gear_type: GearType, main_stat_type: MainStatType) -> bool:
    """부위에 해당 주옵션이 붙을 수 있는지 확인"""
    return main_stat_type in MAIN_STAT_WHITELIST.get(gear_type, ())
