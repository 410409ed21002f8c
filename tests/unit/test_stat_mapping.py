"""
stat_mapping 유닛 테스트
"""
import pytest

from config.gear import GearRank, GearType, MainStatType
from config.hero import HeroClass, HeroElement, HeroRarity
from service.mapping.stat_mapping import (
    lookup_gear_type,
    lookup_main_stat_type,
    lookup_stat_name,
    map_gear_rank,
    map_gear_type,
    map_hero_class,
    map_hero_element,
    map_hero_rarity,
    map_main_stat_type,
    map_stat_name,
)


class TestMainStatType:
    """주옵션 토큰 매핑 테스트"""

    @pytest.mark.parametrize("raw,expected", [
        ("att", MainStatType.ATT),
        ("ATT_RATE", MainStatType.ATT_RATE),
        (" speed ", MainStatType.SPEED),
        ("cri_dmg", MainStatType.CRI_DMG),
        ("max_hp_rate", MainStatType.MAX_HP_RATE),
        ("acc", MainStatType.ACC),
        ("res", MainStatType.RES),
    ])
    def test_exact_tokens(self, raw, expected):
        assert map_main_stat_type(raw) == expected

    def test_substring_heuristics(self):
        """부분 문자열 규칙"""
        assert map_main_stat_type("att-rate%") == MainStatType.ATT_RATE
        assert map_main_stat_type("def rate") == MainStatType.DEF_RATE
        assert map_main_stat_type("MaxHp Rate") == MainStatType.MAX_HP_RATE
        assert map_main_stat_type("cri dmg") == MainStatType.CRI_DMG

    def test_substat_style_tokens(self):
        """부옵션 형식 토큰도 허용"""
        assert lookup_main_stat_type("AttackPercent") == MainStatType.ATT_RATE
        assert lookup_main_stat_type("CriticalHitChancePercent") == MainStatType.CRI

    def test_unknown_defaults_to_att(self):
        assert lookup_main_stat_type("mystery") is None
        assert map_main_stat_type("mystery") == MainStatType.ATT
        assert map_main_stat_type(None) == MainStatType.ATT
        assert map_main_stat_type("") == MainStatType.ATT


class TestGearTypeAndRank:
    """부위 / 등급 매핑 테스트"""

    def test_case_insensitive(self):
        assert map_gear_type("bOOt") == GearType.BOOTS
        assert map_gear_type("Necklace") == GearType.NECK
        assert map_gear_type("helmet") == GearType.HELM

    def test_unknown_gear_type_defaults_to_weapon(self):
        assert lookup_gear_type("shield") is None
        assert map_gear_type("shield") == GearType.WEAPON
        assert map_gear_type(None) == GearType.WEAPON

    def test_rank(self):
        assert map_gear_rank("Heroic") == GearRank.HEROIC
        assert map_gear_rank("EPIC") == GearRank.EPIC
        assert map_gear_rank("mythic") == GearRank.COMMON


class TestHeroTokens:
    """영웅 메타데이터 토큰 매핑 테스트"""

    def test_element(self):
        assert map_hero_element("Fire") == HeroElement.FIRE
        assert map_hero_element("dark") == HeroElement.DARK
        assert map_hero_element("plasma") is None
        assert map_hero_element(None) is None

    @pytest.mark.parametrize("raw,expected", [
        (5, HeroRarity.FIVE_STAR),
        (5.0, HeroRarity.FIVE_STAR),
        ("4", HeroRarity.FOUR_STAR),
        ("five", HeroRarity.FIVE_STAR),
        ("FIVE_STAR", HeroRarity.FIVE_STAR),
        ("6 star", HeroRarity.SIX_STAR),
        (2, None),
        (True, None),
        (None, None),
    ])
    def test_rarity(self, raw, expected):
        assert map_hero_rarity(raw) == expected

    def test_class(self):
        assert map_hero_class("soul_weaver") == HeroClass.SOUL_WEAVER
        assert map_hero_class("Soul Weaver") == HeroClass.SOUL_WEAVER
        assert map_hero_class("Thief") == HeroClass.THIEF
        assert map_hero_class("bard") is None


class TestStatName:
    """부옵션 이름 매핑 테스트"""

    def test_known_names(self):
        assert map_stat_name("CriticalHitChancePercent") == "Crit %"
        assert map_stat_name("criticalhitdamagepercent") == "Crit Dmg %"
        assert map_stat_name("Speed") == "Speed"

    def test_unknown_passthrough(self):
        assert lookup_stat_name("DualAttackChance") is None
        assert map_stat_name("DualAttackChance") == "DualAttackChance"
        assert map_stat_name(None) == ""
