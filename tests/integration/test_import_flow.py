"""
익스포트 임포트 통합 테스트 (인메모리 SQLite)
"""
import json

import pytest

from config.gear import GearType, MainStatType
from config.grade import ScoreGrade
from config.hero import HeroClass, HeroElement, HeroRarity
from exceptions import UserNotFoundError
from models import Gear, GearSubStat, Hero
from service.importer import ImportService
from service.settings_service import SettingsService
from tests.fixtures.export_payloads import (
    INVALID_SPEED_DUPLICATE,
    INVALID_WEAPON_MAIN,
    VALID_ITEMS,
    make_hero,
    make_item,
)

pytestmark = pytest.mark.integration


class TestPartialSuccess:
    """레코드 단위 실패 격리 테스트"""

    @pytest.mark.asyncio
    async def test_ten_valid_two_invalid(self, user):
        """정상 10개 + 규칙 위반 2개 → 성공, 10개 저장, 오류 2건"""
        payload = {"items": VALID_ITEMS + [INVALID_SPEED_DUPLICATE, INVALID_WEAPON_MAIN]}

        result = await ImportService.process_fribbels_export(user.id, payload)

        assert result.success is True
        assert result.message == "Upload successful"
        assert result.gear_count == 10
        assert result.count == 10
        assert len(result.errors) == 2
        assert await Gear.filter(user_id=user.id).count() == 10
        assert await GearSubStat.filter(user_id=user.id).count() == 20

    @pytest.mark.asyncio
    async def test_speed_duplicate_rejected(self, user):
        """주옵션 속도 + 부옵션 Speed 장비는 저장되지 않음"""
        result = await ImportService.process_fribbels_export(
            user.id, {"items": [INVALID_SPEED_DUPLICATE]}
        )

        assert result.success is True
        assert result.gear_count == 0
        assert "3001" in result.errors[0]
        assert "Speed" in result.errors[0]
        assert await Gear.filter(user_id=user.id).count() == 0

    @pytest.mark.asyncio
    async def test_malformed_record_reported(self, user):
        result = await ImportService.process_fribbels_export(
            user.id, {"items": [make_item(item_id=9, rank=None), make_item(item_id=10)]}
        )

        assert result.gear_count == 1
        assert result.errors[0].startswith("Failed to import item 9")

    @pytest.mark.asyncio
    async def test_item_without_id_rejected(self, user):
        """id / ingameId가 없는 장비는 오류로 기록되고 재업로드해도 쌓이지 않음"""
        payload = {"items": [make_item(item_id=None), make_item(item_id=10)]}

        await ImportService.process_fribbels_export(user.id, payload)
        result = await ImportService.process_fribbels_export(user.id, payload)

        assert result.gear_count == 1
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Failed to import item unknown")
        assert "id" in result.errors[0]
        assert await Gear.filter(user_id=user.id).count() == 1

    @pytest.mark.asyncio
    async def test_repeated_ids_in_one_export(self, user):
        """같은 익스포트 안의 중복 ID는 첫 레코드만 반영하고 경고"""
        payload = {
            "heroes": [make_hero(hero_id=1, name="Krau"), make_hero(hero_id=1, name="Krau")],
            "items": [make_item(item_id=7), make_item(item_id=7, main_value=50)],
        }

        result = await ImportService.process_fribbels_export(user.id, payload)

        assert result.hero_count == 1
        assert result.gear_count == 1
        assert result.errors == []
        assert "hero 1: duplicate id in export, skipped" in result.warnings
        assert "item 7: duplicate id in export, skipped" in result.warnings
        hero = await Hero.get(user_id=user.id)
        assert hero.duplicate_count == 1
        gear = await Gear.get(user_id=user.id)
        assert gear.main_stat_value == 45


class TestFatalErrors:
    """처리 전체가 실패하는 경우"""

    @pytest.mark.asyncio
    async def test_missing_items_writes_nothing(self, user):
        result = await ImportService.process_fribbels_export(
            user.id, {"heroes": [make_hero()]}
        )

        assert result.success is False
        assert result.message == "Invalid export file"
        assert await Hero.filter(user_id=user.id).count() == 0
        assert await Gear.filter(user_id=user.id).count() == 0

    @pytest.mark.asyncio
    async def test_malformed_json_upload(self, user):
        result = await ImportService.process_upload(user.id, b"{not json")

        assert result.success is False
        assert "JSON" in result.errors[0]

    @pytest.mark.asyncio
    async def test_upload_bytes(self, user):
        raw = json.dumps({"items": VALID_ITEMS[:2]}).encode("utf-8")

        result = await ImportService.process_upload(user.id, raw)

        assert result.success is True
        assert result.to_dict()["gearCount"] == 2

    @pytest.mark.asyncio
    async def test_unknown_user(self, seeded_db):
        with pytest.raises(UserNotFoundError):
            await ImportService.process_fribbels_export(999, {"items": []})

    @pytest.mark.asyncio
    async def test_time_limit(self, user):
        """제한 시간이 지나면 남은 장비는 건너뛰고 부분 성공"""
        result = await ImportService.process_fribbels_export(
            user.id, {"items": VALID_ITEMS}, max_duration=0
        )

        assert result.success is True
        assert result.timed_out is True
        assert result.gear_count == 0
        assert "10 items not processed" in result.errors[0]
        assert result.message == "Upload partially completed (time limit reached)"

    @pytest.mark.asyncio
    async def test_time_limit_covers_heroes(self, user):
        """영웅 처리 중에도 제한 시간을 확인"""
        heroes = [make_hero(hero_id=i) for i in range(1, 4)]

        result = await ImportService.process_fribbels_export(
            user.id, {"items": VALID_ITEMS[:2], "heroes": heroes}, max_duration=0
        )

        assert result.timed_out is True
        assert result.hero_count == 0
        assert "3 heroes not processed" in result.errors[0]
        assert "2 items not processed" in result.errors[1]
        assert await Hero.filter(user_id=user.id).count() == 0


class TestHeroImport:
    """영웅 임포트 테스트"""

    @pytest.mark.asyncio
    async def test_metadata_inferred(self, user):
        await ImportService.process_fribbels_export(
            user.id, {"items": [], "heroes": [make_hero(code="c2034", stars=5)]}
        )

        hero = await Hero.get(user_id=user.id)
        assert hero.element == HeroElement.ICE
        assert hero.rarity == HeroRarity.FIVE_STAR
        assert hero.hero_class == HeroClass.MAGE
        assert hero.speed == 250
        assert hero.crit_chance == 0.85

    @pytest.mark.asyncio
    async def test_explicit_metadata_wins(self, user):
        hero_raw = make_hero(code="c2034", element="Fire", **{"class": "knight"})
        await ImportService.process_fribbels_export(user.id, {"items": [], "heroes": [hero_raw]})

        hero = await Hero.get(user_id=user.id)
        assert hero.element == HeroElement.FIRE
        assert hero.hero_class == HeroClass.KNIGHT

    @pytest.mark.asyncio
    async def test_duplicate_names_counted(self, user):
        heroes = [make_hero(hero_id=1, name="Krau"), make_hero(hero_id=2, name="Krau")]

        result = await ImportService.process_fribbels_export(user.id, {"items": [], "heroes": heroes})

        assert result.hero_count == 2
        counts = await Hero.filter(user_id=user.id).order_by("ingame_id").values_list(
            "duplicate_count", flat=True
        )
        assert list(counts) == [1, 2]

    @pytest.mark.asyncio
    async def test_reupload_is_idempotent(self, user):
        """같은 파일을 다시 올려도 행 수와 duplicate_count가 그대로"""
        payload = {
            "items": VALID_ITEMS[:3],
            "heroes": [make_hero(hero_id=1, name="Krau"), make_hero(hero_id=2, name="Krau")],
        }

        await ImportService.process_fribbels_export(user.id, payload)
        await ImportService.process_fribbels_export(user.id, payload)

        assert await Hero.filter(user_id=user.id).count() == 2
        assert await Hero.filter(user_id=user.id, duplicate_count=3).count() == 0
        assert await Gear.filter(user_id=user.id).count() == 3
        assert await GearSubStat.filter(user_id=user.id).count() == 6

    @pytest.mark.asyncio
    async def test_invalid_hero_reported(self, user):
        result = await ImportService.process_fribbels_export(
            user.id, {"items": [], "heroes": [{"name": "No Id"}, make_hero()]}
        )

        assert result.hero_count == 1
        assert result.errors[0].startswith("Failed to import hero unknown")


class TestGearImport:
    """장비 저장 내용 테스트"""

    @pytest.mark.asyncio
    async def test_scores_and_grades_stored(self, user):
        await ImportService.process_fribbels_export(user.id, {"items": [make_item()]})

        gear = await Gear.get(user_id=user.id).prefetch_related("substats__stat_type")
        assert gear.gear_type == GearType.BOOTS
        assert gear.main_stat_type == MainStatType.SPEED
        assert gear.ingame_id == "1001"
        assert gear.score == 16.0
        assert gear.f_score == 106.0
        assert gear.score_grade == ScoreGrade.TERRIBLE
        assert gear.f_score_grade == ScoreGrade.EXCELLENT

        grades = {s.stat_type.stat_name: s.grade for s in gear.substats}
        assert grades["Attack %"] == ScoreGrade.POOR
        assert {s.rolls for s in gear.substats} == {1}

    @pytest.mark.asyncio
    async def test_user_settings_applied(self, user):
        """주옵션 제외 설정이면 F-Score == Score"""
        await SettingsService.save_settings(user.id, include_main_stat=False)

        await ImportService.process_fribbels_export(user.id, {"items": [make_item()]})

        gear = await Gear.get(user_id=user.id)
        assert gear.f_score == gear.score

    @pytest.mark.asyncio
    async def test_unknown_tokens_become_warnings(self, user):
        item = make_item(
            gear_type="shield",
            main_type="att",
            substats=[
                {"type": "DualAttackChance", "value": 3},
                {"type": "Speed", "value": 4},
            ],
        )

        result = await ImportService.process_fribbels_export(user.id, {"items": [item]})

        assert result.gear_count == 1
        assert any("unknown gear type" in w for w in result.warnings)
        assert any("DualAttackChance" in w for w in result.warnings)
        gear = await Gear.get(user_id=user.id)
        assert gear.gear_type == GearType.WEAPON
        assert await GearSubStat.filter(gear_id=gear.id).count() == 1

    @pytest.mark.asyncio
    async def test_equipped_hero_linked_across_id_types(self, user):
        """영웅 ID 5001(숫자)과 장비 ingameEquippedId "5001"(문자열) 연결"""
        payload = {
            "heroes": [make_hero(hero_id=5001)],
            "items": [make_item(equipped=True, ingameEquippedId="5001")],
        }

        await ImportService.process_fribbels_export(user.id, payload)

        hero = await Hero.get(user_id=user.id)
        gear = await Gear.get(user_id=user.id)
        assert gear.equipped is True
        assert gear.equipped_by_id == hero.id

    @pytest.mark.asyncio
    async def test_equipped_by_secondary_id(self, user):
        """ingameId가 있는 영웅도 id로 연결 가능"""
        payload = {
            "heroes": [make_hero(hero_id=10, ingameId="abc")],
            "items": [make_item(equippedBy=10)],
        }

        await ImportService.process_fribbels_export(user.id, payload)

        hero = await Hero.get(user_id=user.id)
        assert hero.ingame_id == "abc"
        gear = await Gear.get(user_id=user.id)
        assert gear.equipped_by_id == hero.id

    @pytest.mark.asyncio
    async def test_missing_equipped_hero(self, user):
        result = await ImportService.process_fribbels_export(
            user.id, {"items": [make_item(ingameEquippedId=4242)]}
        )

        assert result.gear_count == 1
        assert any("4242" in w for w in result.warnings)
        gear = await Gear.get(user_id=user.id)
        assert gear.equipped_by_id is None
