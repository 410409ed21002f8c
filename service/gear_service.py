"""
GearService

장비 상세 조회 시 부옵션 배지/등급과 점수 품질을 함께 계산합니다.
"""
from typing import Any

from exceptions import GearNotFoundError
from models.repos import gear_repo
from service.scoring.grade_service import GradeService
from service.settings_service import SettingsService


class GearService:
    """장비 조회 비즈니스 로직"""

    @staticmethod
    async def get_gear_detail(user_id: int, gear_id: int) -> dict[str, Any]:
        """
        장비 상세 + 부옵션 배지/등급

        Args:
            user_id: 소유 사용자 ID
            gear_id: 장비 ID

        Returns:
            장비 정보 dict (substats 항목에 badge / grade 포함)

        Raises:
            GearNotFoundError: 장비가 없거나 다른 사용자의 장비
        """
        gear = await gear_repo.get_gear_with_substats(gear_id)
        if gear is None or gear.user_id != user_id:
            raise GearNotFoundError(gear_id)

        thresholds = await SettingsService.get_effective_thresholds(user_id)

        substats = []
        for substat in gear.substats:
            stat_name = substat.stat_type.stat_name
            badge = GradeService.get_stat_badge(
                stat_name, substat.stat_value, gear.enhance, thresholds
            )
            substats.append({
                "stat_name": stat_name,
                "stat_value": substat.stat_value,
                "rolls": substat.rolls,
                "badge": badge.value if badge else None,
                "grade": GradeService.get_substat_grade(
                    substat.stat_value, stat_name, gear.enhance
                ).value,
            })

        return {
            "id": gear.id,
            "ingame_id": gear.ingame_id,
            "gear_type": gear.gear_type.value,
            "rank": gear.rank.value,
            "set_name": gear.set_name,
            "level": gear.level,
            "enhance": gear.enhance,
            "main_stat_type": gear.main_stat_type.value,
            "main_stat_value": gear.main_stat_value,
            "main_stat_grade": GradeService.get_substat_grade(
                gear.main_stat_value, gear.main_stat_type.name
            ).value,
            "score": gear.score,
            "f_score": gear.f_score,
            "score_grade": GradeService.get_score_quality(gear.score).value,
            "f_score_grade": GradeService.get_score_quality(gear.f_score).value,
            "equipped_by_id": gear.equipped_by_id,
            "substats": substats,
        }
