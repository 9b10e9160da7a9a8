"""Engine output models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SessionType(str, Enum):
    """Session categories the engine can prescribe.

    This is a closed set consumed by presentation layers; do not remove
    members without a version bump.
    """
    FULL_REST = "full_rest"
    EASY_RUN = "easy_run"
    NORMAL_RUN = "normal_run"
    LONG_RUN = "long_run"
    TEMPO_RUN = "tempo_run"
    INTERVALS = "intervals"             # defined, not produced by the classifier yet
    STRENGTH_AND_MOBILITY = "strength_and_mobility"
    REST_WITH_INJURY_ADVICE = "rest_with_injury_advice"
    NEEDS_MORE_RUNS = "needs_more_runs"

    @property
    def display_name(self) -> str:
        names = {
            SessionType.FULL_REST: "Rest Day",
            SessionType.EASY_RUN: "Easy Run",
            SessionType.NORMAL_RUN: "Normal Run",
            SessionType.LONG_RUN: "Long Run",
            SessionType.TEMPO_RUN: "Tempo Run",
            SessionType.INTERVALS: "Intervals",
            SessionType.STRENGTH_AND_MOBILITY: "Strength & Mobility",
            SessionType.REST_WITH_INJURY_ADVICE: "Rest - Injury Risk",
            SessionType.NEEDS_MORE_RUNS: "Building Your Baseline",
        }
        return names[self]

    @property
    def carries_distance(self) -> bool:
        """Whether recommendations of this type prescribe a distance."""
        return self in (
            SessionType.EASY_RUN,
            SessionType.NORMAL_RUN,
            SessionType.LONG_RUN,
            SessionType.TEMPO_RUN,
        )


@dataclass(frozen=True)
class SessionRecommendation:
    """What to do in the next session."""

    type: SessionType
    explanation: str
    distance_km: Optional[float] = None
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "distance_km": self.distance_km,
            "explanation": self.explanation,
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class WeeklyStats:
    """Trailing 7-day training summary."""

    total_distance_km: float = 0.0
    run_count: int = 0
    avg_distance_km: float = 0.0
    avg_difficulty: float = 0.0
    total_duration_min: float = 0.0
    pain_areas: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_distance_km": round(self.total_distance_km, 2),
            "run_count": self.run_count,
            "avg_distance_km": round(self.avg_distance_km, 2),
            "avg_difficulty": round(self.avg_difficulty, 1),
            "total_duration_min": round(self.total_duration_min, 1),
            "pain_areas": list(self.pain_areas),
        }


@dataclass(frozen=True)
class WeeklyBudget:
    """Safe weekly ceiling and what is left of it."""

    safe_weekly_max_km: float
    remaining_km: float
    exceeded: bool


@dataclass(frozen=True)
class LevelProgress:
    """Weeks with at least one run toward the next level."""

    required_weeks: int
    completed_weeks: int

    @property
    def fraction(self) -> float:
        """Completion in [0, 1]."""
        if self.required_weeks <= 0:
            return 0.0
        return max(0.0, min(self.completed_weeks / self.required_weeks, 1.0))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "required_weeks": self.required_weeks,
            "completed_weeks": self.completed_weeks,
            "fraction": round(self.fraction, 3),
        }
