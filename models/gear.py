"""
Gear / GearSubStat 모델 정의

사용자 장비와 장비별 부옵션(최대 4개)을 관리합니다.
"""
from tortoise import models, fields

from config.gear import GearType, GearRank, MainStatType
from config.grade import ScoreGrade


class Gear(models.Model):
    """
    장비 모델

    - (user, ingame_id) 기준으로 업서트
    - 주옵션 스탯은 부옵션에 중복될 수 없음
    - 주옵션은 부위별 허용 목록에 있어야 함
    - score / f_score는 소수점 둘째 자리까지 저장
    """

    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="gears",
        on_delete=fields.CASCADE
    )
    ingame_id = fields.CharField(max_length=64, null=True)
    code = fields.CharField(max_length=64, null=True)
    set_name = fields.CharField(max_length=64, null=True)

    gear_type = fields.CharEnumField(GearType)
    rank = fields.CharEnumField(GearRank)
    level = fields.IntField(default=0)
    enhance = fields.IntField(default=0)

    main_stat_type = fields.CharEnumField(MainStatType)
    main_stat_value = fields.FloatField(default=0)

    equipped = fields.BooleanField(default=False)
    equipped_by = fields.ForeignKeyField(
        "models.Hero",
        related_name="equipped_gears",
        null=True,
        on_delete=fields.SET_NULL
    )
    ingame_equipped_id = fields.CharField(max_length=64, null=True)

    score = fields.FloatField(default=0)
    f_score = fields.FloatField(default=0)
    score_grade = fields.CharEnumField(ScoreGrade, null=True)
    f_score_grade = fields.CharEnumField(ScoreGrade, null=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "gears"
        unique_together = [("user", "ingame_id")]


class GearSubStat(models.Model):
    """장비 부옵션 모델"""

    id = fields.IntField(pk=True)
    gear = fields.ForeignKeyField(
        "models.Gear",
        related_name="substats",
        on_delete=fields.CASCADE
    )
    stat_type = fields.ForeignKeyField(
        "models.StatType",
        related_name="gear_substats",
        on_delete=fields.RESTRICT
    )
    user = fields.ForeignKeyField(
        "models.User",
        related_name="gear_substats",
        on_delete=fields.CASCADE
    )
    stat_value = fields.FloatField()
    rolls = fields.IntField(null=True)
    grade = fields.CharEnumField(ScoreGrade, null=True)

    class Meta:
        table = "gear_substats"
