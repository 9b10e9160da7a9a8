"""Next-session training advisor for recreational runners."""

from .config import EngineConfig, get_config
from .models import (
    DistanceUnit,
    ExperienceLevel,
    GoalType,
    PrimaryGoal,
    RunnerProfile,
    RunSummary,
    SessionRecommendation,
    SessionType,
    TodayCheckIn,
)
from .recommendations import next_session

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "EngineConfig",
    "get_config",
    # Models
    "DistanceUnit",
    "ExperienceLevel",
    "GoalType",
    "PrimaryGoal",
    "RunnerProfile",
    "RunSummary",
    "TodayCheckIn",
    "SessionRecommendation",
    "SessionType",
    # Engine
    "next_session",
]
