"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from run_advisor.config import EngineConfig
from run_advisor.models.profile import (
    DistanceUnit,
    ExperienceLevel,
    GoalType,
    PrimaryGoal,
    RunnerProfile,
    RunSummary,
    TodayCheckIn,
)

# Wednesday, ISO week 2025-W11
NOW = datetime(2025, 3, 12, 9, 0)


def make_run(
    days_ago: float,
    distance_km: float = 5.0,
    duration_minutes: float = 30.0,
    difficulty: int = 3,
    pain: int = 0,
    pain_areas=(),
) -> RunSummary:
    """Run finished ``days_ago`` days before NOW."""
    return RunSummary(
        date=NOW - timedelta(days=days_ago),
        duration_minutes=duration_minutes,
        distance_km=distance_km,
        difficulty_rating=difficulty,
        pain_level=pain,
        pain_areas=frozenset(pain_areas),
    )


def make_profile(
    level: ExperienceLevel = ExperienceLevel.INTERMEDIATE,
    goal: GoalType = GoalType.NONE,
    custom_goal_km=None,
    runs_per_week: int = 3,
    longest_run_km: float = 5.0,
    typical_weekly_km: float = 20.0,
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
    goal_description=None,
) -> RunnerProfile:
    return RunnerProfile(
        uid="user-123",
        display_name="Sam",
        experience_level=level,
        distance_unit=unit,
        primary_goal=PrimaryGoal(goal, custom_goal_km),
        runs_per_week=runs_per_week,
        longest_run_km=longest_run_km,
        typical_weekly_km=typical_weekly_km,
        goal_description=goal_description,
        created_at=NOW - timedelta(days=120),
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def intermediate():
    return make_profile()


@pytest.fixture
def beginner():
    return make_profile(level=ExperienceLevel.BEGINNER)


@pytest.fixture
def rested_check_in():
    return TodayCheckIn(soreness=0, sleep_quality=5, pain_now_level=0)
