"""
GradeService 유닛 테스트
"""
import pytest

from config.grade import DEFAULT_STAT_THRESHOLDS, GENERIC_GRADE_THRESHOLDS, ScoreGrade, StatBadge
from service.scoring.grade_service import GradeService


class TestStatBadge:
    """부옵션 배지 테스트"""

    @pytest.mark.parametrize("value,expected", [
        (18, StatBadge.RARE),
        (12, StatBadge.GOOD),
        (8, StatBadge.MED),
        (4, StatBadge.BAD),
        (3.9, None),
    ])
    def test_boundaries_at_max_enhance(self, value, expected):
        """+15 기준 [4, 8, 12, 18] 경계"""
        assert GradeService.get_stat_badge("Speed", value, 15) == expected

    def test_low_enhance_scaled_up(self):
        """+0 장비는 관측값을 18/3 배로 환산"""
        assert GradeService.get_stat_badge("Speed", 3, 0) == StatBadge.RARE
        assert GradeService.get_stat_badge("Speed", 3, 15) is None

    def test_unknown_stat_or_bad_thresholds(self):
        assert GradeService.get_stat_badge("Mystery", 100, 15) is None
        assert GradeService.get_stat_badge("Speed", 100, 15, {"Speed": (1, 2, 3)}) is None
        assert GradeService.get_stat_badge("Speed", "fast", 15) is None

    def test_scaling_strictly_decreasing(self):
        """강화가 높을수록 환산값이 작아지고 +15에서 비율 1"""
        scaled = [GradeService.scale_for_badge(10, level) for level in range(16)]
        assert all(a > b for a, b in zip(scaled, scaled[1:]))
        assert GradeService.badge_ratio(15) == 1.0
        assert scaled[-1] == 10

    def test_enhance_clamped(self):
        assert GradeService.badge_ratio(20) == 1.0
        assert GradeService.badge_ratio(-3) == GradeService.badge_ratio(0)
        assert GradeService.badge_ratio(None) == GradeService.badge_ratio(0)


class TestResolveStatThresholds:
    """사용자 배지 경계값 병합 테스트"""

    def test_merge(self):
        merged = GradeService.resolve_stat_thresholds({
            "Speed": [5, 10, 15, 20],
            "Crit %": {"plus15": [1, 2, 3, 4]},
            "Attack": [],
            "Health": ["a", 1, 2, 3],
        })
        assert merged["Speed"] == (5, 10, 15, 20)
        assert merged["Crit %"] == (1, 2, 3, 4)
        assert merged["Attack"] == tuple(DEFAULT_STAT_THRESHOLDS["Attack"])
        assert merged["Health"] == tuple(DEFAULT_STAT_THRESHOLDS["Health"])

    def test_none_returns_defaults(self):
        merged = GradeService.resolve_stat_thresholds(None)
        assert merged == {name: tuple(v) for name, v in DEFAULT_STAT_THRESHOLDS.items()}

    def test_custom_thresholds_used_for_badge(self):
        thresholds = GradeService.resolve_stat_thresholds({"Speed": [1, 2, 3, 4]})
        assert GradeService.get_stat_badge("Speed", 4, 15, thresholds) == StatBadge.RARE


class TestScoreQuality:
    """점수 품질 등급 테스트"""

    @pytest.mark.parametrize("score,expected", [
        (85, ScoreGrade.EXCELLENT),
        (84.99, ScoreGrade.GOOD),
        (65, ScoreGrade.GOOD),
        (50, ScoreGrade.AVERAGE),
        (45, ScoreGrade.POOR),
        (44.99, ScoreGrade.TERRIBLE),
        (-5, ScoreGrade.TERRIBLE),
        ("abc", ScoreGrade.TERRIBLE),
        (None, ScoreGrade.TERRIBLE),
    ])
    def test_quality(self, score, expected):
        assert GradeService.get_score_quality(score) == expected


class TestSubstatGrade:
    """부옵션 / 주옵션 등급 테스트"""

    @pytest.mark.parametrize("enhance,expected", [
        (15, 1.0), (12, 1.0), (11, 0.9), (9, 0.9), (8, 0.8), (6, 0.8), (5, 0.7), (0, 0.7),
    ])
    def test_grade_multiplier(self, enhance, expected):
        assert GradeService.grade_multiplier(enhance) == expected

    def test_speed_grades(self):
        assert GradeService.get_substat_grade(20, "Speed") == ScoreGrade.EXCELLENT
        assert GradeService.get_substat_grade(16, "Speed") == ScoreGrade.AVERAGE
        assert GradeService.get_substat_grade(5, "Speed") == ScoreGrade.TERRIBLE

    def test_enhance_lowers_thresholds(self):
        """+6 장비는 경계값 × 0.8"""
        assert GradeService.get_substat_grade(16, "Speed", enhance=6) == ScoreGrade.EXCELLENT

    def test_fraction_main_stat_rescaled(self):
        """소수로 저장된 비율형 주옵션은 퍼센트로 환산"""
        assert GradeService.get_substat_grade(0.65, "ATT_RATE") == ScoreGrade.EXCELLENT
        assert GradeService.get_substat_grade(65, "att_rate") == ScoreGrade.EXCELLENT

    def test_crit_and_percent_names_not_rescaled(self):
        assert GradeService.get_substat_grade(0.6, "CRI") == ScoreGrade.TERRIBLE
        assert GradeService.get_substat_grade(0.5, "Attack %") == ScoreGrade.TERRIBLE

    def test_threshold_lookup(self):
        assert GradeService.get_grade_thresholds("Mystery") == GENERIC_GRADE_THRESHOLDS
        assert GradeService.get_grade_thresholds("att_rate").excellent == 65
        assert GradeService.get_grade_thresholds("Crit %").excellent == 12

    def test_non_numeric_value(self):
        assert GradeService.get_substat_grade("n/a", "Speed") == ScoreGrade.TERRIBLE
