"""
Fribbels 익스포트 입력 스키마 (pydantic)

레코드 단위로 검증하여 통과한 값만 타입이 보장된 모델로 변환합니다.
ID는 canonical_id() 한 곳에서만 문자열로 정규화됩니다.
"""
import math
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from config.hero import HERO
from config.importer import IMPORT


def canonical_id(value: Any) -> Optional[str]:
    """
    외부 ID 정규화 (숫자/문자열 → 문자열)

    None, 빈 문자열, "null", "undefined", "0" 은 ID 없음으로 취급합니다.
    정수값 실수(123.0)는 "123"으로 변환합니다.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    if text.lower() in IMPORT.NULL_ID_TOKENS:
        return None
    return text


def coerce_number(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """숫자 또는 숫자 문자열 → float (실패 시 default)"""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def describe_validation_error(error: ValidationError) -> str:
    """pydantic 검증 오류를 한 줄 메시지로 변환"""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "record"
        parts.append(f"{location}: {detail.get('msg')}")
    return "; ".join(parts)


class FribbelsSubstat(BaseModel):
    """부옵션 레코드"""
    model_config = ConfigDict(extra="ignore")

    type: str = Field(min_length=1)
    value: float = 0.0
    rolls: Optional[int] = None

    @field_validator("type", mode="before")
    @classmethod
    def _strip_type(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> float:
        return coerce_number(value, 0.0)

    @field_validator("rolls", mode="before")
    @classmethod
    def _coerce_rolls(cls, value: Any) -> Optional[int]:
        number = coerce_number(value, None)
        return None if number is None else int(number)


class FribbelsItem(BaseModel):
    """
    장비 레코드

    - 부위: type 또는 gear
    - 주옵션: mainStatType / mainStatValue 또는 main.type / main.value
    - 장착 영웅: ingameEquippedId 또는 equippedBy
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    ingame_id: Optional[str] = Field(default=None, alias="ingameId")
    gear_type: str = Field(min_length=1, alias="type")
    rank: str = Field(min_length=1)
    level: int = Field(default=0, ge=0)
    enhance: int = Field(default=0, ge=0, le=IMPORT.MAX_ENHANCE)
    main_stat_type: str = Field(min_length=1, alias="mainStatType")
    main_stat_value: float = Field(default=0.0, alias="mainStatValue")
    substats: list[FribbelsSubstat] = Field(default_factory=list, max_length=IMPORT.MAX_SUBSTATS)
    equipped: Optional[bool] = None
    ingame_equipped_id: Optional[str] = Field(default=None, alias="ingameEquippedId")
    code: Optional[str] = None
    set_name: Optional[str] = Field(default=None, alias="set")

    @model_validator(mode="before")
    @classmethod
    def _merge_alternate_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        if not merged.get("type") and merged.get("gear"):
            merged["type"] = merged["gear"]

        main = merged.get("main")
        if isinstance(main, dict):
            if not merged.get("mainStatType") and main.get("type"):
                merged["mainStatType"] = main["type"]
            if merged.get("mainStatValue") is None and main.get("value") is not None:
                merged["mainStatValue"] = main["value"]

        if merged.get("ingameEquippedId") is None and merged.get("equippedBy") is not None:
            merged["ingameEquippedId"] = merged["equippedBy"]
        if merged.get("substats") is None:
            merged["substats"] = []
        return merged

    @field_validator("id", "ingame_id", "ingame_equipped_id", mode="before")
    @classmethod
    def _canonical_ids(cls, value: Any) -> Optional[str]:
        return canonical_id(value)

    @field_validator("gear_type", "rank", "main_stat_type", mode="before")
    @classmethod
    def _strip_tokens(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("level", "enhance", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> Any:
        if value is None:
            return 0
        number = coerce_number(value, None)
        if number is None or not number.is_integer():
            return value
        return int(number)

    @field_validator("main_stat_value", mode="before")
    @classmethod
    def _coerce_main_value(cls, value: Any) -> float:
        return coerce_number(value, 0.0)

    @field_validator("code", "set_name", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @model_validator(mode="after")
    def _require_identity(self) -> "FribbelsItem":
        if self.ingame_id is None and self.id is None:
            raise ValueError("item id (id / ingameId) is required")
        return self

    @property
    def external_id(self) -> str:
        """업서트 키로 쓰는 외부 ID (ingameId 우선)"""
        return self.ingame_id or self.id

    @property
    def is_equipped(self) -> bool:
        if self.equipped is not None:
            return self.equipped and self.ingame_equipped_id is not None
        return self.ingame_equipped_id is not None


class FribbelsHero(BaseModel):
    """영웅 레코드 (id 또는 ingameId 필수)"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    ingame_id: Optional[str] = Field(default=None, alias="ingameId")
    name: str = HERO.DEFAULT_NAME
    code: Optional[str] = None
    element: Optional[str] = None
    rarity: Optional[Any] = None
    hero_class: Optional[str] = Field(default=None, alias="class")
    stars: Optional[Any] = None

    attack: Optional[float] = None
    defense: Optional[float] = None
    health: Optional[float] = None
    speed: Optional[float] = None
    crit_chance: Optional[float] = Field(default=None, alias="criticalHitChance")
    crit_damage: Optional[float] = Field(default=None, alias="criticalHitDamage")
    effectiveness: Optional[float] = None
    effect_resistance: Optional[float] = Field(default=None, alias="effectResistance")

    @field_validator("id", "ingame_id", mode="before")
    @classmethod
    def _canonical_ids(cls, value: Any) -> Optional[str]:
        return canonical_id(value)

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> str:
        if value is None:
            return HERO.DEFAULT_NAME
        text = str(value).strip()
        return text or HERO.DEFAULT_NAME

    @field_validator("code", "element", "hero_class", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator(
        "attack", "defense", "health", "speed",
        "crit_chance", "crit_damage", "effectiveness", "effect_resistance",
        mode="before",
    )
    @classmethod
    def _optional_number(cls, value: Any) -> Optional[float]:
        return coerce_number(value, None)

    @model_validator(mode="after")
    def _require_identity(self) -> "FribbelsHero":
        if self.ingame_id is None and self.id is None:
            raise ValueError("hero id (id / ingameId) is required")
        return self

    @property
    def external_id(self) -> str:
        """업서트 키로 쓰는 외부 ID (ingameId 우선)"""
        return self.ingame_id or self.id

    @property
    def linked_ids(self) -> set[str]:
        """장비의 ingameEquippedId가 가리킬 수 있는 ID 집합"""
        return {value for value in (self.ingame_id, self.id) if value is not None}

    def stat_values(self) -> dict[str, Optional[float]]:
        return {
            "attack": self.attack,
            "defense": self.defense,
            "health": self.health,
            "speed": self.speed,
            "crit_chance": self.crit_chance,
            "crit_damage": self.crit_damage,
            "effectiveness": self.effectiveness,
            "effect_resistance": self.effect_resistance,
        }


class FribbelsExport(BaseModel):
    """
    익스포트 최상위 구조

    레코드 단위 검증은 임포트 단계에서 개별적으로 수행하므로
    여기서는 items 배열 존재와 heroes 배열 형식만 확인합니다.
    """
    model_config = ConfigDict(extra="ignore")

    items: list[Any]
    heroes: list[Any] = Field(default_factory=list)

    @field_validator("heroes", mode="before")
    @classmethod
    def _heroes_default(cls, value: Any) -> Any:
        return [] if value is None else value
