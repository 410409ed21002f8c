"""
테스트용 Fribbels 익스포트 데이터
"""
from typing import Any


def make_item(
    item_id: Any = 1001,
    gear_type: str = "boots",
    rank: str = "Epic",
    main_type: str = "speed",
    main_value: float = 45,
    substats: list[dict] | None = None,
    enhance: int = 15,
    **extra: Any,
) -> dict[str, Any]:
    """장비 레코드 1건 생성"""
    if substats is None:
        substats = [
            {"type": "AttackPercent", "value": 8, "rolls": 1},
            {"type": "CriticalHitChancePercent", "value": 5, "rolls": 1},
        ]
    item = {
        "id": item_id,
        "type": gear_type,
        "rank": rank,
        "level": 85,
        "enhance": enhance,
        "mainStatType": main_type,
        "mainStatValue": main_value,
        "substats": substats,
        "set": "SpeedSet",
        "code": "eb11",
    }
    item.update(extra)
    return item


def make_hero(
    hero_id: Any = 5001,
    name: str = "Arbiter Vildred",
    code: str = "c2007",
    stars: int = 5,
    **extra: Any,
) -> dict[str, Any]:
    """영웅 레코드 1건 생성"""
    hero = {
        "id": hero_id,
        "name": name,
        "code": code,
        "stars": stars,
        "attack": 1500,
        "speed": 250,
        "criticalHitChance": 0.85,
    }
    hero.update(extra)
    return hero


# 부위별 허용 주옵션을 지키는 정상 장비 10개
VALID_ITEMS: list[dict[str, Any]] = [
    make_item(item_id=2000 + i, gear_type=gear_type, main_type=main_type, main_value=value)
    for i, (gear_type, main_type, value) in enumerate([
        ("weapon", "att", 500),
        ("helm", "max_hp", 2700),
        ("armor", "def", 310),
        ("neck", "cri_dmg", 0.7),
        ("neck", "def_rate", 0.6),
        ("ring", "acc", 0.65),
        ("ring", "max_hp_rate", 0.65),
        ("boots", "speed", 45),
        ("boots", "max_hp_rate", 0.65),
        ("weapon", "att", 515),
    ])
]

# 규칙 위반 장비: 주옵션 속도 + 부옵션 속도
INVALID_SPEED_DUPLICATE: dict[str, Any] = make_item(
    item_id=3001,
    gear_type="boots",
    main_type="speed",
    substats=[
        {"type": "Speed", "value": 4, "rolls": 1},
        {"type": "AttackPercent", "value": 8, "rolls": 1},
    ],
)

# 규칙 위반 장비: 무기에 방어력 주옵션
INVALID_WEAPON_MAIN: dict[str, Any] = make_item(
    item_id=3002,
    gear_type="weapon",
    main_type="def",
)
