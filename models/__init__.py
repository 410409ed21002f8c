from models.users import User
from models.hero import Hero
from models.gear import Gear, GearSubStat
from models.reference import StatType, GearSet
from models.settings import UserSettings

__all__ = [
    "User",
    "Hero",
    "Gear",
    "GearSubStat",
    "StatType",
    "GearSet",
    "UserSettings",
]
