"""
Gear Repository

장비 및 부옵션 데이터 접근 레이어입니다.
"""
from typing import Any, Optional

from tortoise.transactions import in_transaction

from models import Gear, GearSubStat


async def replace_gear_with_substats(
    user_id: int,
    ingame_id: str,
    values: dict[str, Any],
    substats: list[dict[str, Any]],
) -> Gear:
    """
    장비 업서트 + 부옵션 교체 (단일 트랜잭션)

    (user, ingame_id) 기준으로 갱신하고,
    기존 부옵션은 모두 삭제 후 다시 생성합니다.

    Args:
        user_id: 소유 사용자 ID
        ingame_id: 정규화된 외부 ID
        values: 장비 필드
        substats: [{"stat_type_id", "stat_value", "rolls", "grade"}, ...]

    Returns:
        저장된 Gear
    """
    async with in_transaction() as conn:
        gear, _ = await Gear.update_or_create(
            defaults=values,
            using_db=conn,
            user_id=user_id,
            ingame_id=ingame_id,
        )
        await GearSubStat.filter(gear_id=gear.id).using_db(conn).delete()

        if substats:
            await GearSubStat.bulk_create(
                [
                    GearSubStat(gear_id=gear.id, user_id=user_id, **substat)
                    for substat in substats
                ],
                using_db=conn,
            )
    return gear


async def get_gear_with_substats(gear_id: int) -> Optional[Gear]:
    """
    장비 단건 조회 (부옵션 + 스탯 종류 포함)

    Args:
        gear_id: 장비 ID

    Returns:
        Gear 또는 None
    """
    return await Gear.get_or_none(id=gear_id).prefetch_related("substats__stat_type")


async def get_user_gears_with_substats(user_id: int) -> list[Gear]:
    """
    사용자 장비 전체 조회 (부옵션 + 스탯 종류 포함)

    Args:
        user_id: 소유 사용자 ID

    Returns:
        Gear 목록
    """
    return await Gear.filter(user_id=user_id).order_by("id").prefetch_related(
        "substats__stat_type"
    )


async def get_gear_owner_ids() -> list[int]:
    """장비를 보유한 사용자 ID 목록"""
    return await Gear.all().distinct().order_by("user_id").values_list("user_id", flat=True)


async def update_gear_scores(gear: Gear, **scores: Any) -> None:
    """
    점수 관련 필드만 갱신

    Args:
        gear: 대상 장비
        **scores: score, f_score, score_grade, f_score_grade
    """
    for key, value in scores.items():
        setattr(gear, key, value)
    await gear.save(update_fields=list(scores.keys()))


async def count_gears(user_id: int, **filters: Any) -> int:
    """사용자 장비 개수 (추가 필터 가능)"""
    return await Gear.filter(user_id=user_id, **filters).count()


async def get_gear_field_values(user_id: int, *field_names: str) -> list[tuple]:
    """
    통계용 필드 값 목록

    Args:
        user_id: 소유 사용자 ID
        *field_names: 조회할 필드 이름

    Returns:
        필드 값 튜플 목록
    """
    return await Gear.filter(user_id=user_id).values_list(*field_names)
