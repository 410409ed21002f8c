"""
Hero Repository

보유 영웅 데이터 접근 레이어입니다.
"""
from typing import Any, Iterable, Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from models import Hero


async def count_heroes_by_name(
    user_id: int,
    exclude_ingame_ids: Iterable[str] = (),
) -> dict[str, int]:
    """
    이름별 기존 영웅 수 조회

    이번 업로드에 다시 포함된 영웅은 제외하여,
    같은 파일을 재업로드해도 duplicate_count가 늘어나지 않도록 합니다.

    Args:
        user_id: 소유 사용자 ID
        exclude_ingame_ids: 집계에서 제외할 ingame_id 목록

    Returns:
        {영웅 이름: 수}
    """
    query = Hero.filter(user_id=user_id)
    excluded = list(exclude_ingame_ids)
    if excluded:
        query = query.exclude(ingame_id__in=excluded)

    counts: dict[str, int] = {}
    for name in await query.values_list("name", flat=True):
        counts[name] = counts.get(name, 0) + 1
    return counts


async def get_hero_id_map(user_id: int) -> dict[str, int]:
    """
    ingame_id → 내부 영웅 ID 맵

    Args:
        user_id: 소유 사용자 ID

    Returns:
        {ingame_id: hero.id}
    """
    rows = await Hero.filter(user_id=user_id).values_list("ingame_id", "id")
    return {ingame_id: hero_id for ingame_id, hero_id in rows}


async def upsert_hero(
    user_id: int,
    ingame_id: str,
    values: dict[str, Any],
    using_db: Optional[BaseDBAsyncClient] = None,
) -> Hero:
    """
    (user, ingame_id) 기준 영웅 업서트

    Args:
        user_id: 소유 사용자 ID
        ingame_id: 정규화된 외부 ID
        values: 갱신할 필드
        using_db: 트랜잭션 연결

    Returns:
        저장된 Hero
    """
    hero, _ = await Hero.update_or_create(
        defaults=values,
        using_db=using_db,
        user_id=user_id,
        ingame_id=ingame_id,
    )
    return hero


async def get_user_heroes(user_id: int) -> list[Hero]:
    return await Hero.filter(user_id=user_id).order_by("name", "duplicate_count")


async def get_hero_field_values(user_id: int, *field_names: str) -> list[tuple]:
    """통계용 영웅 필드 값 목록"""
    return await Hero.filter(user_id=user_id).values_list(*field_names)
