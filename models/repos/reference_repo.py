"""
Reference Repository

스탯 종류 / 세트 효과 참조 데이터 접근 레이어입니다.
"""
import logging
from typing import Optional

from config.reference_data import (
    GEAR_SET_DEFS,
    STAT_TYPE_DEFS,
    main_stat_gear_types,
    substat_gear_types,
)
from models import GearSet, StatType

logger = logging.getLogger(__name__)


async def list_stat_types() -> list[StatType]:
    """
    스탯 종류 전체 조회

    Returns:
        StatType 목록 (ID 순)
    """
    return await StatType.all().order_by("id")


async def get_stat_type_map() -> dict[str, StatType]:
    """
    스탯 종류 조회 맵

    익스포트 토큰(original_stat_name)과 표시 이름(stat_name)
    양쪽으로 찾을 수 있도록 두 키 모두 등록합니다.

    Returns:
        {이름: StatType}
    """
    lookup: dict[str, StatType] = {}
    for stat_type in await StatType.all():
        lookup[stat_type.original_stat_name] = stat_type
        lookup[stat_type.stat_name] = stat_type
    return lookup


async def list_gear_sets(active_only: bool = True) -> list[GearSet]:
    """
    세트 효과 목록 조회

    Args:
        active_only: 활성 세트만 조회

    Returns:
        GearSet 목록
    """
    query = GearSet.filter(is_active=True) if active_only else GearSet.all()
    return await query.order_by("-pieces_required", "set_name")


async def get_gear_set(set_name: str) -> Optional[GearSet]:
    return await GearSet.get_or_none(set_name=set_name)


async def seed_reference_data() -> tuple[int, int]:
    """
    스탯 종류 / 세트 효과 시드 (멱등)

    Returns:
        (새로 생성된 스탯 종류 수, 새로 생성된 세트 수)
    """
    created_stats = 0
    for definition in STAT_TYPE_DEFS:
        _, created = await StatType.get_or_create(
            stat_name=definition.stat_name,
            defaults={
                "original_stat_name": definition.original_stat_name,
                "stat_category": definition.category,
                "weight": definition.weight,
                "main_stat_gear_types": main_stat_gear_types(definition.stat_name),
                "substat_gear_types": substat_gear_types(definition.stat_name),
            },
        )
        created_stats += int(created)

    created_sets = 0
    for definition in GEAR_SET_DEFS:
        _, created = await GearSet.get_or_create(
            set_name=definition.set_name,
            defaults={
                "display_name": definition.display_name,
                "pieces_required": definition.pieces_required,
                "effect_description": definition.effect_description,
                "icon": definition.icon,
                "category": definition.category,
                "is_active": definition.is_active,
            },
        )
        created_sets += int(created)

    logger.info(f"Reference data seeded: {created_stats} stat types, {created_sets} gear sets")
    return created_stats, created_sets
