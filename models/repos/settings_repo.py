"""
UserSettings Repository

사용자 점수 설정 데이터 접근 레이어입니다.
"""
from typing import Any, Optional

from models import UserSettings


async def get_settings(user_id: int) -> Optional[UserSettings]:
    """
    사용자 설정 조회

    Args:
        user_id: 대상 사용자 ID

    Returns:
        UserSettings 객체 또는 None
    """
    return await UserSettings.get_or_none(user_id=user_id)


async def get_or_create_settings(user_id: int) -> UserSettings:
    """
    사용자 설정 조회 또는 기본값으로 생성

    Args:
        user_id: 대상 사용자 ID

    Returns:
        UserSettings 객체
    """
    settings, _ = await UserSettings.get_or_create(user_id=user_id)
    return settings


async def update_settings(user_id: int, values: dict[str, Any]) -> UserSettings:
    """
    사용자 설정 갱신 (없으면 생성)

    Args:
        user_id: 대상 사용자 ID
        values: 갱신할 필드

    Returns:
        UserSettings 객체
    """
    settings, _ = await UserSettings.update_or_create(defaults=values, user_id=user_id)
    return settings


async def get_settings_by_user_ids(user_ids: list[int]) -> dict[int, UserSettings]:
    rows = await UserSettings.filter(user_id__in=user_ids)
    return {row.user_id: row for row in rows}
