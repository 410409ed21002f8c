"""영웅 메타데이터 설정"""
from dataclasses import dataclass
from enum import Enum


class HeroElement(str, Enum):
    """영웅 속성 (5종)"""
    FIRE = "FIRE"
    ICE = "ICE"
    EARTH = "EARTH"
    LIGHT = "LIGHT"
    DARK = "DARK"


class HeroClass(str, Enum):
    """영웅 직업 (6종)"""
    WARRIOR = "WARRIOR"
    KNIGHT = "KNIGHT"
    THIEF = "THIEF"
    RANGER = "RANGER"
    MAGE = "MAGE"
    SOUL_WEAVER = "SOUL_WEAVER"


class HeroRarity(str, Enum):
    """영웅 성급"""
    THREE_STAR = "THREE_STAR"
    FOUR_STAR = "FOUR_STAR"
    FIVE_STAR = "FIVE_STAR"
    SIX_STAR = "SIX_STAR"


# 성급 숫자 → 등급
STARS_TO_RARITY: dict[int, HeroRarity] = {
    3: HeroRarity.THREE_STAR,
    4: HeroRarity.FOUR_STAR,
    5: HeroRarity.FIVE_STAR,
    6: HeroRarity.SIX_STAR,
}

# 영웅 코드 두 번째 글자 → 속성
CODE_DIGIT_TO_ELEMENT: dict[str, HeroElement] = {
    "0": HeroElement.FIRE,
    "1": HeroElement.FIRE,
    "2": HeroElement.ICE,
    "3": HeroElement.EARTH,
    "4": HeroElement.LIGHT,
    "5": HeroElement.DARK,
}

# 영웅 코드 숫자 구간 (1000 단위) → 직업
CODE_BAND_TO_CLASS: dict[int, HeroClass] = {
    1: HeroClass.WARRIOR,
    2: HeroClass.MAGE,
    3: HeroClass.THIEF,
    4: HeroClass.RANGER,
    5: HeroClass.KNIGHT,
    6: HeroClass.SOUL_WEAVER,
}

# 이름에 포함된 키워드 → 속성 (대소문자 구분, 순서대로 검사)
NAME_KEYWORD_TO_ELEMENT: tuple[tuple[tuple[str, ...], HeroElement], ...] = (
    (("Fire", "Flame"), HeroElement.FIRE),
    (("Ice", "Frost"), HeroElement.ICE),
    (("Earth", "Nature"), HeroElement.EARTH),
    (("Light", "Holy"), HeroElement.LIGHT),
    (("Dark", "Shadow"), HeroElement.DARK),
)


@dataclass(frozen=True)
class HeroConfig:
    """영웅 임포트 설정"""

    DEFAULT_NAME: str = "Unknown Hero"
    """이름이 없는 영웅의 기본 이름"""

    CLASS_BAND_SIZE: int = 1000
    """직업 구간 크기"""


HERO = HeroConfig()
