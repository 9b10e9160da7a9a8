"""Engine input and output models."""

from .profile import (
    DistanceUnit,
    ExperienceLevel,
    GoalType,
    PrimaryGoal,
    RunnerProfile,
    RunSummary,
    TodayCheckIn,
)
from .recommendation import (
    LevelProgress,
    SessionRecommendation,
    SessionType,
    WeeklyBudget,
    WeeklyStats,
)

__all__ = [
    "DistanceUnit",
    "ExperienceLevel",
    "GoalType",
    "PrimaryGoal",
    "RunnerProfile",
    "RunSummary",
    "TodayCheckIn",
    "LevelProgress",
    "SessionRecommendation",
    "SessionType",
    "WeeklyBudget",
    "WeeklyStats",
]
