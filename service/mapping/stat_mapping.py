"""
Stat Mapping

익스포트 파일의 문자열 토큰을 정규 열거형으로 변환합니다.

- lookup_*: 매칭 실패 시 None (임포트에서 경고 생성용)
- map_*: 장비 관련 값은 문서화된 기본값, 영웅 관련 값은 None으로 대체
"""
import re
from typing import Any, Optional

from config.gear import MAIN_STAT_TO_STAT_NAME, GearRank, GearType, MainStatType
from config.hero import HeroClass, HeroElement, HeroRarity

_NON_TOKEN = re.compile(r"[^a-z_]")
_NON_LETTER = re.compile(r"[^a-z]")
_NON_ALNUM = re.compile(r"[^a-z0-9]")

_GEAR_TYPE_MAP: dict[str, GearType] = {
    "weapon": GearType.WEAPON,
    "armor": GearType.ARMOR,
    "helm": GearType.HELM,
    "helmet": GearType.HELM,
    "neck": GearType.NECK,
    "necklace": GearType.NECK,
    "ring": GearType.RING,
    "boot": GearType.BOOTS,
    "boots": GearType.BOOTS,
}

_GEAR_RANK_MAP: dict[str, GearRank] = {rank.value.lower(): rank for rank in GearRank}

_ELEMENT_MAP: dict[str, HeroElement] = {element.value.lower(): element for element in HeroElement}

_RARITY_MAP: dict[str, HeroRarity] = {
    "3": HeroRarity.THREE_STAR,
    "4": HeroRarity.FOUR_STAR,
    "5": HeroRarity.FIVE_STAR,
    "6": HeroRarity.SIX_STAR,
    "three": HeroRarity.THREE_STAR,
    "four": HeroRarity.FOUR_STAR,
    "five": HeroRarity.FIVE_STAR,
    "six": HeroRarity.SIX_STAR,
    "threestar": HeroRarity.THREE_STAR,
    "fourstar": HeroRarity.FOUR_STAR,
    "fivestar": HeroRarity.FIVE_STAR,
    "sixstar": HeroRarity.SIX_STAR,
    "3star": HeroRarity.THREE_STAR,
    "4star": HeroRarity.FOUR_STAR,
    "5star": HeroRarity.FIVE_STAR,
    "6star": HeroRarity.SIX_STAR,
}

_CLASS_MAP: dict[str, HeroClass] = {
    "warrior": HeroClass.WARRIOR,
    "knight": HeroClass.KNIGHT,
    "ranger": HeroClass.RANGER,
    "mage": HeroClass.MAGE,
    "soulweaver": HeroClass.SOUL_WEAVER,
    "thief": HeroClass.THIEF,
}

_STAT_NAME_MAP: dict[str, str] = {
    "criticalhitchancepercent": "Crit %",
    "criticalhitdamagepercent": "Crit Dmg %",
    "attackpercent": "Attack %",
    "defensepercent": "Defense %",
    "healthpercent": "Health %",
    "effectivenesspercent": "Effectiveness %",
    "effectresistancepercent": "Effect Resist %",
    "speed": "Speed",
    "attack": "Attack",
    "defense": "Defense",
    "health": "Health",
}

_STAT_NAME_TO_MAIN_STAT: dict[str, MainStatType] = {
    name: stat_type for stat_type, name in MAIN_STAT_TO_STAT_NAME.items()
}


def _normalize(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip().lower()


# =============================================================================
# 장비
# =============================================================================


def lookup_main_stat_type(raw: Any) -> Optional[MainStatType]:
    """
    주옵션 토큰 → MainStatType (실패 시 None)

    소문자 변환 후 영문자/밑줄 외 문자를 제거하고,
    정확히 일치하는 값을 먼저 찾은 뒤 부분 문자열 규칙을 적용합니다.
    """
    normalized = _NON_TOKEN.sub("", _normalize(raw))
    if not normalized:
        return None

    for stat_type in MainStatType:
        if stat_type.value == normalized:
            return stat_type

    if "att" in normalized and "rate" in normalized:
        return MainStatType.ATT_RATE
    if "def" in normalized and "rate" in normalized:
        return MainStatType.DEF_RATE
    if "max" in normalized and "hp" in normalized and "rate" in normalized:
        return MainStatType.MAX_HP_RATE
    if "cri" in normalized and "dmg" in normalized:
        return MainStatType.CRI_DMG

    # 부옵션 토큰 형식 ("AttackPercent", "CriticalHitChancePercent")
    return _STAT_NAME_TO_MAIN_STAT.get(_STAT_NAME_MAP.get(normalized, ""))


def map_main_stat_type(raw: Any) -> MainStatType:
    """주옵션 토큰 → MainStatType (기본값 ATT)"""
    return lookup_main_stat_type(raw) or MainStatType.ATT


def lookup_gear_type(raw: Any) -> Optional[GearType]:
    return _GEAR_TYPE_MAP.get(_normalize(raw))


def map_gear_type(raw: Any) -> GearType:
    """부위 토큰 → GearType (기본값 WEAPON)"""
    return lookup_gear_type(raw) or GearType.WEAPON


def lookup_gear_rank(raw: Any) -> Optional[GearRank]:
    return _GEAR_RANK_MAP.get(_normalize(raw))


def map_gear_rank(raw: Any) -> GearRank:
    """등급 토큰 → GearRank (기본값 COMMON)"""
    return lookup_gear_rank(raw) or GearRank.COMMON


# =============================================================================
# 영웅
# =============================================================================


def map_hero_element(raw: Any) -> Optional[HeroElement]:
    """속성 토큰 → HeroElement (실패 시 None)"""
    return _ELEMENT_MAP.get(_normalize(raw))


def map_hero_rarity(raw: Any) -> Optional[HeroRarity]:
    """
    성급 토큰 → HeroRarity (실패 시 None)

    3~6 숫자, "five", "fivestar", "five_star" 형태를 허용합니다.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    return _RARITY_MAP.get(_NON_ALNUM.sub("", _normalize(raw)))


def map_hero_class(raw: Any) -> Optional[HeroClass]:
    """직업 토큰 → HeroClass (실패 시 None, "soul_weaver" 허용)"""
    return _CLASS_MAP.get(_NON_LETTER.sub("", _normalize(raw)))


# =============================================================================
# 부옵션 이름
# =============================================================================


def lookup_stat_name(raw: Any) -> Optional[str]:
    return _STAT_NAME_MAP.get(_normalize(raw))


def map_stat_name(raw: Any) -> str:
    """부옵션 토큰 → 표시 이름 (모르는 이름은 그대로 반환)"""
    mapped = lookup_stat_name(raw)
    if mapped is not None:
        return mapped
    return "" if raw is None else str(raw)
