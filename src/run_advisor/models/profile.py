"""Runner profile, run history and daily check-in models.

All distances are kilometers internally; ``DistanceUnit`` only affects display.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional

KM_TO_MILES = 0.621371
METERS_PER_MILE = 1609.34


class ExperienceLevel(str, Enum):
    """Self-reported running experience."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class DistanceUnit(str, Enum):
    """Preferred display unit."""
    KILOMETERS = "kilometers"
    MILES = "miles"

    @property
    def abbreviation(self) -> str:
        return "km" if self is DistanceUnit.KILOMETERS else "mi"

    def from_km(self, km: float) -> float:
        """Convert a kilometer value into this unit."""
        if self is DistanceUnit.MILES:
            return km * KM_TO_MILES
        return km

    def to_km(self, value: float) -> float:
        """Convert a value in this unit back to kilometers."""
        if self is DistanceUnit.MILES:
            return value / KM_TO_MILES
        return value

    def from_meters(self, meters: float) -> float:
        if self is DistanceUnit.MILES:
            return meters / METERS_PER_MILE
        return meters / 1000


class GoalType(str, Enum):
    """Primary training goal."""
    NONE = "none"
    GENERAL_FITNESS = "general_fitness"
    WEIGHT_LOSS = "weight_loss"
    RACE_5K = "race_5k"
    RACE_10K = "race_10k"
    RACE_HALF_MARATHON = "race_half_marathon"
    RACE_MARATHON = "race_marathon"
    PERSONAL_BEST = "personal_best"

    @property
    def display_name(self) -> str:
        names = {
            GoalType.NONE: "None",
            GoalType.GENERAL_FITNESS: "General Fitness",
            GoalType.WEIGHT_LOSS: "Weight Loss",
            GoalType.RACE_5K: "5k Race",
            GoalType.RACE_10K: "10k Race",
            GoalType.RACE_HALF_MARATHON: "Half Marathon",
            GoalType.RACE_MARATHON: "Marathon",
            GoalType.PERSONAL_BEST: "Personal Best",
        }
        return names[self]

    @property
    def race_distance_km(self) -> Optional[float]:
        """Fixed race distance for standard race goals."""
        distances = {
            GoalType.RACE_5K: 5.0,
            GoalType.RACE_10K: 10.0,
            GoalType.RACE_HALF_MARATHON: 21.1,
            GoalType.RACE_MARATHON: 42.2,
        }
        return distances.get(self)

    @property
    def is_race_or_pr(self) -> bool:
        return self.race_distance_km is not None or self is GoalType.PERSONAL_BEST


@dataclass(frozen=True)
class PrimaryGoal:
    """
    A goal variant plus the distance it implies.

    Standard race goals take their distance from a fixed table; a personal
    best goal carries the user-supplied ``custom_distance_km``. All other
    goals have no numeric distance.
    """
    type: GoalType = GoalType.NONE
    custom_distance_km: Optional[float] = None

    @property
    def target_distance_km(self) -> Optional[float]:
        standard = self.type.race_distance_km
        if standard is not None:
            return standard
        if self.type is GoalType.PERSONAL_BEST and self.custom_distance_km:
            return self.custom_distance_km
        return None

    @property
    def display_name(self) -> str:
        return self.type.display_name

    @property
    def is_race_or_pr(self) -> bool:
        return self.type.is_race_or_pr


@dataclass(frozen=True)
class RunnerProfile:
    """Runner profile as supplied by the profile store."""
    uid: str
    display_name: str
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    distance_unit: DistanceUnit = DistanceUnit.KILOMETERS
    primary_goal: PrimaryGoal = field(default_factory=PrimaryGoal)
    runs_per_week: int = 3
    longest_run_km: float = 0.0
    typical_weekly_km: float = 0.0
    goal_description: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_beginner(self) -> bool:
        return self.experience_level is ExperienceLevel.BEGINNER

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "uid": self.uid,
            "display_name": self.display_name,
            "experience_level": self.experience_level.value,
            "distance_unit": self.distance_unit.value,
            "primary_goal": self.primary_goal.type.value,
            "custom_goal_distance_km": self.primary_goal.custom_distance_km,
            "runs_per_week": self.runs_per_week,
            "longest_run_km": self.longest_run_km,
            "typical_weekly_km": self.typical_weekly_km,
            "goal_description": self.goal_description,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class RunSummary:
    """Immutable snapshot of one completed run."""
    date: datetime
    duration_minutes: float
    distance_km: float
    difficulty_rating: int = 3
    pain_level: int = 0
    pain_areas: FrozenSet[str] = frozenset()

    @property
    def duration_seconds(self) -> float:
        return self.duration_minutes * 60


@dataclass(frozen=True)
class TodayCheckIn:
    """Same-day subjective state."""
    soreness: int = 0
    sleep_quality: int = 3
    pain_now_level: int = 0
    pain_now_areas: FrozenSet[str] = frozenset()


# Profile updates from a settings surface. Each returns a new profile.

def update_primary_goal(profile: RunnerProfile, goal: PrimaryGoal) -> RunnerProfile:
    return replace(profile, primary_goal=goal)


def update_experience_level(profile: RunnerProfile, level: ExperienceLevel) -> RunnerProfile:
    return replace(profile, experience_level=level)


def update_distance_unit(profile: RunnerProfile, unit: DistanceUnit) -> RunnerProfile:
    return replace(profile, distance_unit=unit)


def update_goal_description(profile: RunnerProfile, description: Optional[str]) -> RunnerProfile:
    """Store a trimmed goal description; blank text clears it."""
    cleaned = description.strip() if description else None
    return replace(profile, goal_description=cleaned or None)


def update_custom_goal_distance(profile: RunnerProfile, distance_km: Optional[float]) -> RunnerProfile:
    goal = replace(profile.primary_goal, custom_distance_km=distance_km)
    return replace(profile, primary_goal=goal)
