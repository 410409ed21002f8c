"""
Hero 모델 정의

사용자가 보유한 영웅을 관리합니다.
"""
from tortoise import models, fields

from config.hero import HeroElement, HeroClass, HeroRarity


class Hero(models.Model):
    """
    보유 영웅 모델

    - (user, ingame_id) 기준으로 업서트
    - ingame_id는 문자열로 정규화된 외부 ID
    - duplicate_count: 같은 이름 영웅 중 몇 번째인지 (1부터)
    """

    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="heroes",
        on_delete=fields.CASCADE
    )
    ingame_id = fields.CharField(max_length=64)
    name = fields.CharField(max_length=255)
    code = fields.CharField(max_length=32, null=True)

    element = fields.CharEnumField(HeroElement, null=True)
    hero_class = fields.CharEnumField(HeroClass, null=True)
    rarity = fields.CharEnumField(HeroRarity, null=True)

    # 익스포트 시점의 스탯
    attack = fields.FloatField(null=True)
    defense = fields.FloatField(null=True)
    health = fields.FloatField(null=True)
    speed = fields.FloatField(null=True)
    crit_chance = fields.FloatField(null=True)
    crit_damage = fields.FloatField(null=True)
    effectiveness = fields.FloatField(null=True)
    effect_resistance = fields.FloatField(null=True)

    duplicate_count = fields.IntField(default=1)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "heroes"
        unique_together = [("user", "ingame_id")]
