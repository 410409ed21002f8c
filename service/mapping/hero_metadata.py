"""
Hero Metadata Inference

익스포트에 명시되지 않은 영웅 속성/성급/직업을 코드 패턴과 이름으로 추정합니다.
추정은 최선 노력(best-effort)이며 어떤 입력에도 예외를 발생시키지 않습니다.
"""
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from config.hero import (
    CODE_BAND_TO_CLASS,
    CODE_DIGIT_TO_ELEMENT,
    HERO,
    NAME_KEYWORD_TO_ELEMENT,
    STARS_TO_RARITY,
    HeroClass,
    HeroElement,
    HeroRarity,
)

# "c2034", "c1017_s01" → 선행 한 글자 뒤의 숫자열
_CODE_NUMBER = re.compile(r"^.(\d+)")


@dataclass(frozen=True)
class HeroMetadata:
    """추정된 영웅 메타데이터 (모든 필드 nullable)"""
    element: Optional[HeroElement] = None
    rarity: Optional[HeroRarity] = None
    hero_class: Optional[HeroClass] = None


def rarity_from_stars(stars: Any) -> Optional[HeroRarity]:
    if isinstance(stars, bool) or not isinstance(stars, (int, float)):
        return None
    if isinstance(stars, float) and not stars.is_integer():
        return None
    return STARS_TO_RARITY.get(int(stars))


def element_from_code(code: str) -> Optional[HeroElement]:
    if len(code) < 2:
        return None
    return CODE_DIGIT_TO_ELEMENT.get(code[1])


def class_from_code(code: str) -> Optional[HeroClass]:
    match = _CODE_NUMBER.match(code)
    if not match:
        return None
    band = int(match.group(1)) // HERO.CLASS_BAND_SIZE
    return CODE_BAND_TO_CLASS.get(band)


def element_from_name(name: str) -> Optional[HeroElement]:
    for keywords, element in NAME_KEYWORD_TO_ELEMENT:
        if any(keyword in name for keyword in keywords):
            return element
    return None


def extract_hero_metadata(hero: Mapping[str, Any]) -> HeroMetadata:
    """
    영웅 레코드에서 메타데이터 추정

    - 성급: stars 숫자 (3~6)
    - 속성: code 두 번째 글자 (0/1 불, 2 얼음, 3 땅, 4 빛, 5 어둠)
    - 직업: code 숫자부의 1000 단위 구간 (1000대 전사 ~ 6000대 정령사)
    - 속성이 비어 있으면 이름 키워드로 한 번 더 추정

    Args:
        hero: 익스포트의 영웅 레코드 (dict)

    Returns:
        HeroMetadata (추정 실패 필드는 None)
    """
    if not isinstance(hero, Mapping):
        return HeroMetadata()

    rarity = rarity_from_stars(hero.get("stars"))

    element = None
    hero_class = None
    code = hero.get("code")
    if isinstance(code, str) and code:
        element = element_from_code(code)
        hero_class = class_from_code(code)

    name = hero.get("name")
    if element is None and isinstance(name, str) and name:
        element = element_from_name(name)

    return HeroMetadata(element=element, rarity=rarity, hero_class=hero_class)
