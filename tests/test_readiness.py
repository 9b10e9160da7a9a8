"""Tests for readiness scoring and the injury guard."""

from datetime import timedelta

import pytest

from run_advisor.config import EngineConfig, SafetyThresholds
from run_advisor.models.profile import ExperienceLevel, TodayCheckIn
from run_advisor.models.recommendation import SessionType
from run_advisor.recommendations.injury import check_injury_risk
from run_advisor.recommendations.readiness import (
    calculate_readiness,
    calculate_today_modifier,
    days_between,
    experience_factor,
)

from conftest import NOW, make_profile, make_run


class TestCalculateReadiness:
    """Test the readiness formula."""

    @pytest.mark.parametrize("level,expected", [
        (ExperienceLevel.BEGINNER, 37),
        (ExperienceLevel.INTERMEDIATE, 43),
        (ExperienceLevel.ADVANCED, 49),
    ])
    def test_experience_scales_rest_bonus(self, level, expected):
        """Two rest days after a 30 minute run at difficulty 3."""
        last_run = make_run(2, duration_minutes=30, difficulty=3)
        readiness = calculate_readiness(make_profile(level=level), last_run, now=NOW)
        assert readiness == pytest.approx(expected)

    def test_check_in_modifier(self):
        last_run = make_run(2, duration_minutes=30, difficulty=3)
        today = TodayCheckIn(soreness=2, sleep_quality=4, pain_now_level=1)
        readiness = calculate_readiness(make_profile(), last_run, today, NOW)
        assert readiness == pytest.approx(48)

    def test_last_run_pain_penalty(self):
        last_run = make_run(2, duration_minutes=30, difficulty=3, pain=4)
        readiness = calculate_readiness(make_profile(), last_run, now=NOW)
        assert readiness == pytest.approx(33)

    def test_clamped_to_zero(self):
        last_run = make_run(0, duration_minutes=300, difficulty=5, pain=10)
        today = TodayCheckIn(soreness=10, sleep_quality=1, pain_now_level=10)
        assert calculate_readiness(make_profile(), last_run, today, NOW) == 0.0

    def test_clamped_to_hundred(self):
        last_run = make_run(30, duration_minutes=10, difficulty=1)
        profile = make_profile(level=ExperienceLevel.ADVANCED)
        today = TodayCheckIn(sleep_quality=5)
        assert calculate_readiness(profile, last_run, today, NOW) == 100.0

    def test_weights_from_config(self):
        config = EngineConfig(weights={"base": 60})
        last_run = make_run(2, duration_minutes=30, difficulty=3)
        assert calculate_readiness(make_profile(), last_run, now=NOW, config=config) == pytest.approx(53)


class TestReadinessHelpers:
    """Test the readiness building blocks."""

    def test_days_between_counts_calendar_days(self):
        late_evening = NOW.replace(hour=23) - timedelta(days=1)
        assert days_between(late_evening, NOW) == 1
        assert days_between(NOW - timedelta(hours=2), NOW) == 0

    def test_days_between_never_negative(self):
        assert days_between(NOW + timedelta(days=3), NOW) == 0

    def test_experience_factor(self):
        assert experience_factor(ExperienceLevel.BEGINNER) == 0.7
        assert experience_factor(ExperienceLevel.ADVANCED) == 1.3

    def test_today_modifier_without_check_in(self):
        assert calculate_today_modifier(None) == 0.0


class TestInjuryGuard:
    """Test the pain rules that override training."""

    def test_critical_current_pain(self):
        rec = check_injury_risk(make_run(1), TodayCheckIn(pain_now_level=8))
        assert rec.type == SessionType.REST_WITH_INJURY_ADVICE
        assert rec.distance_km is None
        assert rec.warnings == ("High pain level - do not run",)
        assert "doctor" in rec.explanation

    def test_moderate_pain_in_high_risk_area(self):
        today = TodayCheckIn(pain_now_level=6, pain_now_areas=frozenset({"Knees"}))
        rec = check_injury_risk(make_run(1), today)
        assert rec.warnings == ("Pain in critical area - rest recommended",)

    @pytest.mark.parametrize("label", ["knees", " Knees ", "SHINS", "achilles\t"])
    def test_high_risk_area_labels_normalized(self, label):
        today = TodayCheckIn(pain_now_level=6, pain_now_areas=frozenset({label}))
        rec = check_injury_risk(make_run(1), today)
        assert rec.warnings == ("Pain in critical area - rest recommended",)

    def test_blank_area_label_ignored(self):
        today = TodayCheckIn(pain_now_level=7, pain_now_areas=frozenset({"", "  "}))
        assert check_injury_risk(make_run(1), today) is None

    def test_moderate_pain_elsewhere_allowed(self):
        today = TodayCheckIn(pain_now_level=6, pain_now_areas=frozenset({"Hamstring"}))
        assert check_injury_risk(make_run(1), today) is None

    def test_previous_run_pain(self):
        rec = check_injury_risk(make_run(1, pain=8), TodayCheckIn())
        assert rec.warnings == ("Previous run caused pain",)

    def test_current_pain_takes_precedence(self):
        rec = check_injury_risk(make_run(1, pain=9), TodayCheckIn(pain_now_level=9))
        assert rec.warnings == ("High pain level - do not run",)

    def test_no_inputs(self):
        assert check_injury_risk(None, None) is None

    def test_thresholds_from_config(self):
        config = EngineConfig(safety=SafetyThresholds(critical_pain=5))
        rec = check_injury_risk(None, TodayCheckIn(pain_now_level=5), config)
        assert rec.type == SessionType.REST_WITH_INJURY_ADVICE
