"""참조 데이터 시드 정의 (스탯 종류 / 세트 효과)"""
from dataclasses import dataclass

from config.gear import (
    StatCategory,
    MAIN_STAT_WHITELIST,
    MAIN_STAT_TO_STAT_NAME,
)


@dataclass(frozen=True)
class StatTypeDef:
    """부옵션 종류 정의"""
    stat_name: str
    original_stat_name: str
    category: StatCategory
    weight: float


@dataclass(frozen=True)
class GearSetDef:
    """세트 효과 정의"""
    set_name: str
    display_name: str
    pieces_required: int
    effect_description: str
    icon: str
    category: str = "primary"
    is_active: bool = True


STAT_TYPE_DEFS: tuple[StatTypeDef, ...] = (
    StatTypeDef("Speed", "Speed", StatCategory.FLAT, 2.0),
    StatTypeDef("Attack", "Attack", StatCategory.FLAT, 0.3),
    StatTypeDef("Attack %", "AttackPercent", StatCategory.PERCENTAGE, 1.2),
    StatTypeDef("Defense", "Defense", StatCategory.FLAT, 0.2),
    StatTypeDef("Defense %", "DefensePercent", StatCategory.PERCENTAGE, 0.8),
    StatTypeDef("Health", "Health", StatCategory.FLAT, 0.2),
    StatTypeDef("Health %", "HealthPercent", StatCategory.PERCENTAGE, 0.8),
    StatTypeDef("Crit %", "CriticalHitChancePercent", StatCategory.PERCENTAGE, 1.5),
    StatTypeDef("Crit Dmg %", "CriticalHitDamagePercent", StatCategory.PERCENTAGE, 1.3),
    StatTypeDef("Effectiveness %", "EffectivenessPercent", StatCategory.PERCENTAGE, 0.7),
    StatTypeDef("Effect Resist %", "EffectResistancePercent", StatCategory.PERCENTAGE, 0.6),
)


def main_stat_gear_types(stat_name: str) -> list[str]:
    """해당 스탯을 주옵션으로 가질 수 있는 부위 목록"""
    main_types = [m for m, name in MAIN_STAT_TO_STAT_NAME.items() if name == stat_name]
    return [
        gear_type.value
        for gear_type, allowed in MAIN_STAT_WHITELIST.items()
        if any(m in allowed for m in main_types)
    ]


def substat_gear_types(stat_name: str) -> list[str]:
    """
    해당 스탯을 부옵션으로 가질 수 있는 부위 목록

    주옵션이 하나로 고정된 부위(무기/투구/갑옷)는 그 주옵션과 같은 부옵션을 가질 수 없습니다.
    """
    return [
        gear_type.value
        for gear_type, allowed in MAIN_STAT_WHITELIST.items()
        if not (len(allowed) == 1 and MAIN_STAT_TO_STAT_NAME[allowed[0]] == stat_name)
    ]


GEAR_SET_DEFS: tuple[GearSetDef, ...] = (
    GearSetDef("SpeedSet", "Speed Set", 4, "+25% Speed", "⚡"),
    GearSetDef("AttackSet", "Attack Set", 4, "+35% Attack", "⚔️"),
    GearSetDef("DestructionSet", "Destruction Set", 4, "+40% Crit Damage", "💥"),
    GearSetDef("LifestealSet", "Lifesteal Set", 4, "Heal 20% of damage dealt", "🩸"),
    GearSetDef("CounterSet", "Counter Set", 4, "20% chance to counterattack", "🔄"),
    GearSetDef("InjurySet", "Injury Set", 4, "Reduces enemy max HP", "💀"),
    GearSetDef("RageSet", "Rage Set", 4, "+30% Crit Dmg vs debuffed targets", "😠"),
    GearSetDef(
        "ReversalSet", "Reversal Set", 4,
        "Increases Speed by 15%. Upon reviving, increases Combat Readiness by 50%", "🔄",
    ),
    GearSetDef(
        "RiposteSet", "Riposte Set", 4,
        "When successfully evading, has a 70% chance to counterattack", "⚔️",
    ),
    GearSetDef("ProtectionSet", "Protection Set", 4, "+15% Barrier strength", "🛡️"),
    GearSetDef("RevengeSet", "Revenge Set", 4, "Increases Speed when attacked", "⚡"),
    GearSetDef("HealthSet", "Health Set", 2, "+15% Health", "❤️", "secondary"),
    GearSetDef("DefenseSet", "Defense Set", 2, "+15% Defense", "🛡️", "secondary"),
    GearSetDef("CriticalSet", "Critical Set", 2, "+12% Crit Chance", "🎯", "secondary"),
    GearSetDef("HitSet", "Hit Set", 2, "+20% Effectiveness", "🎯", "secondary"),
    GearSetDef("ImmunitySet", "Immunity Set", 2, "Grants Immunity for 1 turn", "💪", "secondary"),
    GearSetDef("ResistSet", "Resist Set", 2, "+20% Effect Resistance", "🛡️", "secondary"),
    GearSetDef("TorrentSet", "Torrent Set", 2, "+10% Atk, -10% HP", "🌊", "secondary"),
    GearSetDef("PenetrationSet", "Penetration Set", 2, "Ignores 15% Defense", "⚡", "secondary"),
    GearSetDef("UnitySet", "Unity Set", 2, "+4% Ally Dual Attack Chance", "🤝", "secondary"),
)
