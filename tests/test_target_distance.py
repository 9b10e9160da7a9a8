"""Tests for target distance progression and session classification."""

import pytest

from run_advisor.models.profile import ExperienceLevel, GoalType
from run_advisor.models.recommendation import SessionType, WeeklyStats
from run_advisor.recommendations.session import classify_session, is_long_run, qualifies_for_tempo
from run_advisor.recommendations.target_distance import (
    calculate_short_run_distance,
    calculate_target_distance,
    readiness_multiplier,
    round_distance,
)

from conftest import make_profile


class TestReadinessMultiplier:
    """Test the readiness scaling bands."""

    @pytest.mark.parametrize("readiness,multiplier", [
        (100, 1.1),
        (80, 1.1),
        (79.9, 1.0),
        (60, 1.0),
        (59.9, 0.7),
        (40, 0.7),
        (39.9, 0.5),
        (0, 0.5),
    ])
    def test_bands(self, readiness, multiplier):
        assert readiness_multiplier(readiness) == multiplier


class TestCalculateTargetDistance:
    """Test the two progression regimes and their caps."""

    def test_beginner_first_progression(self):
        """Beginner averaging 3.0 km with readiness 75 moves up to 3.5 km."""
        profile = make_profile(level=ExperienceLevel.BEGINNER, longest_run_km=3.0)
        assert calculate_target_distance(profile, 3.0, 20.0, 75) == 3.5

    def test_goal_less_low_readiness_scaled_down(self):
        profile = make_profile()
        assert calculate_target_distance(profile, 5.0, 30.0, 50) == 3.5

    def test_goal_less_very_low_readiness(self):
        profile = make_profile()
        assert calculate_target_distance(profile, 8.0, 30.0, 30) == 4.0

    def test_goal_early_phase(self):
        """Half marathon goal at 24% progress: +0.3 km for a beginner."""
        profile = make_profile(
            level=ExperienceLevel.BEGINNER,
            goal=GoalType.RACE_HALF_MARATHON,
            longest_run_km=6.0,
        )
        assert calculate_target_distance(profile, 5.0, 50.0, 70) == 5.3

    def test_goal_mid_phase(self):
        profile = make_profile(goal=GoalType.RACE_10K)
        assert calculate_target_distance(profile, 6.0, 50.0, 65) == 6.8

    def test_goal_late_phase_with_high_readiness(self):
        """5k goal at 90%: 5% growth, then the 1.1 readiness bonus."""
        profile = make_profile(goal=GoalType.RACE_5K)
        assert calculate_target_distance(profile, 4.5, 20.0, 85) == 5.2

    def test_personal_best_without_distance_is_goal_less(self):
        profile = make_profile(goal=GoalType.PERSONAL_BEST)
        assert calculate_target_distance(profile, 5.0, 30.0, 65) == 6.0

    def test_personal_best_custom_distance(self):
        profile = make_profile(goal=GoalType.PERSONAL_BEST, custom_goal_km=8.0)
        # 5.0 / 8.0 = 62.5% progress -> +0.8
        assert calculate_target_distance(profile, 5.0, 30.0, 65) == 5.8

    def test_capped_by_weekly_budget(self):
        assert calculate_target_distance(make_profile(), 10.0, 4.0, 70) == 4.0

    def test_capped_at_recent_average_ratio(self):
        # 11.0 x 1.1 = 12.1, held to 1.2 x 10.0
        assert calculate_target_distance(make_profile(), 10.0, 50.0, 85) == 12.0
        profile = make_profile(goal=GoalType.RACE_MARATHON)
        assert calculate_target_distance(profile, 5.0, 50.0, 70) == 5.5

    def test_beginner_cap(self):
        profile = make_profile(level=ExperienceLevel.BEGINNER, longest_run_km=4.0)
        assert calculate_target_distance(profile, 6.0, 50.0, 70) == 5.0

    def test_beginner_cap_uses_longest_run(self):
        profile = make_profile(level=ExperienceLevel.BEGINNER, longest_run_km=6.0)
        assert calculate_target_distance(profile, 6.0, 50.0, 70) == 6.5

    def test_rounding_never_exceeds_budget(self):
        assert calculate_target_distance(make_profile(), 10.0, 3.46, 70) == 3.4

    def test_floor_when_budget_below_minimum(self):
        assert calculate_target_distance(make_profile(), 10.0, 1.0, 70) == 2.0

    @pytest.mark.parametrize("avg", [0.5, 1.7, 2.94, 3.33, 5.0, 7.77, 12.0, 25.0])
    @pytest.mark.parametrize("readiness", [30, 45, 65, 85])
    def test_always_within_floor_and_budget(self, avg, readiness):
        for budget in (2.0, 2.05, 3.17, 10.0):
            distance = calculate_target_distance(make_profile(), avg, budget, readiness)
            assert 2.0 <= distance <= budget
            assert round(distance, 1) == distance


class TestShortRunDistance:
    """Test the low-readiness recovery run."""

    def test_half_average(self):
        assert calculate_short_run_distance(6.0, 30.0) == 3.0

    def test_capped_at_four(self):
        assert calculate_short_run_distance(10.0, 30.0) == 4.0

    def test_floor(self):
        assert calculate_short_run_distance(2.0, 30.0) == 2.0

    def test_round_distance(self):
        assert round_distance(3.25) == 3.3
        assert round_distance(3.24) == 3.2


class TestClassifySession:
    """Test the run type decision."""

    def test_long_run(self):
        assert is_long_run(2.0, 1.5)
        assert not is_long_run(6.0, 5.0)
        session = classify_session(make_profile(), 61, 2.0, 1.5, WeeklyStats())
        assert session == SessionType.LONG_RUN

    def test_low_readiness_is_easy_before_long(self):
        """Below readiness 60 a floored target is still an easy run."""
        profile = make_profile(goal=GoalType.RACE_10K)
        assert is_long_run(2.0, 1.5)
        assert classify_session(profile, 42, 2.0, 1.5, WeeklyStats()) == SessionType.EASY_RUN
        assert classify_session(profile, 59.9, 2.0, 1.5, WeeklyStats()) == SessionType.EASY_RUN
        assert classify_session(profile, 60, 2.0, 1.5, WeeklyStats()) == SessionType.LONG_RUN

    def test_tempo(self):
        profile = make_profile(level=ExperienceLevel.ADVANCED, goal=GoalType.RACE_10K)
        stats = WeeklyStats(run_count=2, avg_difficulty=2.5)
        assert qualifies_for_tempo(profile, 77, stats)
        assert classify_session(profile, 77, 5.8, 5.0, stats) == SessionType.TEMPO_RUN

    @pytest.mark.parametrize("kwargs,readiness,stats", [
        ({"goal": GoalType.GENERAL_FITNESS}, 80, WeeklyStats(run_count=2, avg_difficulty=2)),
        ({"goal": GoalType.RACE_5K, "level": ExperienceLevel.BEGINNER}, 80, WeeklyStats(run_count=2, avg_difficulty=2)),
        ({"goal": GoalType.RACE_5K}, 74, WeeklyStats(run_count=2, avg_difficulty=2)),
        ({"goal": GoalType.RACE_5K}, 80, WeeklyStats(run_count=1, avg_difficulty=2)),
        ({"goal": GoalType.RACE_5K}, 80, WeeklyStats(run_count=3, avg_difficulty=3.5)),
    ])
    def test_tempo_requirements(self, kwargs, readiness, stats):
        assert not qualifies_for_tempo(make_profile(**kwargs), readiness, stats)

    def test_normal_and_easy(self):
        stats = WeeklyStats(run_count=1, avg_difficulty=3)
        assert classify_session(make_profile(), 70, 5.0, 5.0, stats) == SessionType.NORMAL_RUN
        assert classify_session(make_profile(), 69.9, 5.0, 5.0, stats) == SessionType.EASY_RUN

    def test_never_intervals(self):
        stats = WeeklyStats(run_count=3, avg_difficulty=1)
        profile = make_profile(level=ExperienceLevel.ADVANCED, goal=GoalType.RACE_5K)
        for readiness in range(0, 101, 5):
            for target in (2.0, 5.0, 9.0):
                assert classify_session(profile, readiness, target, 5.0, stats) != SessionType.INTERVALS
