"""
장비 규칙 검증

- 주옵션과 같은 스탯 이름의 부옵션 금지
- 부위별 허용 주옵션 목록 확인
"""
from typing import Iterable, Optional

from config.gear import (
    MAIN_STAT_TO_STAT_NAME,
    MAIN_STAT_WHITELIST,
    GearType,
    MainStatType,
    is_main_stat_allowed,
)


def find_main_sub_conflict(
    main_stat_type: MainStatType,
    substat_names: Iterable[str],
) -> Optional[str]:
    """
    주옵션과 충돌하는 부옵션 이름 반환

    Args:
        main_stat_type: 주옵션 종류
        substat_names: 부옵션 표시 이름 목록

    Returns:
        충돌하는 스탯 이름, 없으면 None
    """
    forbidden = MAIN_STAT_TO_STAT_NAME.get(main_stat_type)
    if forbidden is None:
        return None
    for name in substat_names:
        if name == forbidden:
            return name
    return None


def validate_gear_rules(
    gear_type: GearType,
    main_stat_type: MainStatType,
    substat_names: Iterable[str],
) -> Optional[str]:
    """
    장비 규칙 위반 사유 반환

    Returns:
        사람이 읽을 수 있는 사유, 위반이 없으면 None
    """
    if not is_main_stat_allowed(gear_type, main_stat_type):
        allowed = ", ".join(m.name for m in MAIN_STAT_WHITELIST.get(gear_type, ()))
        return (
            f"main stat {main_stat_type.name} is not allowed on {gear_type.value} "
            f"(allowed: {allowed})"
        )

    conflict = find_main_sub_conflict(main_stat_type, substat_names)
    if conflict is not None:
        return f"substat '{conflict}' conflicts with main stat {main_stat_type.name}"
    return None
