"""
UserSettings 모델 정의

사용자별 F-Score / 배지 설정을 관리합니다.
"""
from tortoise import models, fields


class UserSettings(models.Model):
    """
    사용자 점수 설정 모델

    모든 맵은 기본값 위에 덮어쓰는 희소(sparse) 설정입니다.
    - f_score_substat_weights: 부옵션 이름 → 가중치
    - f_score_main_stat_weights: 주옵션 키(소문자) → 가중치
    - substat_thresholds: 부옵션 이름 → {"plus15": [t1, t2, t3, t4]}
    """

    id = fields.IntField(pk=True)
    user = fields.OneToOneField(
        "models.User",
        related_name="settings",
        on_delete=fields.CASCADE
    )

    f_score_include_main_stat = fields.BooleanField(default=True)
    f_score_substat_weights = fields.JSONField(default=dict)
    f_score_main_stat_weights = fields.JSONField(default=dict)
    substat_thresholds = fields.JSONField(default=dict)

    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "settings"
