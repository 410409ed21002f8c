"""
참조 데이터 모델 정의

StatType / GearSet은 시드 이후 읽기 전용으로 사용됩니다.
"""
from tortoise import models, fields

from config.gear import StatCategory


class StatType(models.Model):
    """부옵션 종류"""

    id = fields.IntField(pk=True)
    stat_name = fields.CharField(max_length=64, unique=True)
    original_stat_name = fields.CharField(max_length=64, unique=True)
    stat_category = fields.CharEnumField(StatCategory)
    weight = fields.FloatField(default=1.0)
    main_stat_gear_types = fields.JSONField(default=list)
    substat_gear_types = fields.JSONField(default=list)

    class Meta:
        table = "stat_types"


class GearSet(models.Model):
    """세트 효과"""

    id = fields.IntField(pk=True)
    set_name = fields.CharField(max_length=64, unique=True)
    display_name = fields.CharField(max_length=128)
    pieces_required = fields.IntField()
    effect_description = fields.TextField()
    icon = fields.CharField(max_length=16, null=True)
    category = fields.CharField(max_length=16, default="primary")
    is_active = fields.BooleanField(default=True)

    class Meta:
        table = "gear_sets"
