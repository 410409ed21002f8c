from typing import Optional

from exceptions import UserNotFoundError
from models import User


async def find_user_by_id(user_id: int) -> Optional[User]:
    return await User.get_or_none(id=user_id)


async def find_user_by_username(username: str) -> Optional[User]:
    return await User.get_or_none(username=username)


async def get_user_or_raise(user_id: int) -> User:
    user = await User.get_or_none(id=user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


async def create_user(username: str) -> User:
    return await User.create(username=username)
