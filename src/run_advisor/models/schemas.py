"""Pydantic schemas for engine input files.

These validate raw JSON at the boundary and convert it to the immutable
engine models. Field bounds match the ranges the engine assumes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .profile import (
    DistanceUnit,
    ExperienceLevel,
    GoalType,
    PrimaryGoal,
    RunnerProfile,
    RunSummary,
    TodayCheckIn,
)


class ProfileSchema(BaseModel):
    """Runner profile as stored."""

    uid: str
    display_name: str = Field(default="Runner", max_length=50)
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    distance_unit: DistanceUnit = DistanceUnit.KILOMETERS
    primary_goal: GoalType = GoalType.NONE
    custom_goal_distance_km: Optional[float] = Field(default=None, gt=0)
    runs_per_week: int = Field(default=3, gt=0)
    longest_run_km: float = Field(default=0.0, ge=0)
    typical_weekly_km: float = Field(default=0.0, ge=0)
    goal_description: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    def to_domain(self) -> RunnerProfile:
        return RunnerProfile(
            uid=self.uid,
            display_name=self.display_name,
            experience_level=self.experience_level,
            distance_unit=self.distance_unit,
            primary_goal=PrimaryGoal(self.primary_goal, self.custom_goal_distance_km),
            runs_per_week=self.runs_per_week,
            longest_run_km=self.longest_run_km,
            typical_weekly_km=self.typical_weekly_km,
            goal_description=self.goal_description,
            created_at=self.created_at,
        )


class RunSchema(BaseModel):
    """One completed run."""

    date: datetime
    duration_minutes: float = Field(..., gt=0)
    distance_km: float = Field(..., gt=0)
    difficulty_rating: int = Field(default=3, ge=1, le=5)
    pain_level: int = Field(default=0, ge=0, le=10)
    pain_areas: List[str] = Field(default_factory=list)

    def to_domain(self) -> RunSummary:
        return RunSummary(
            date=self.date,
            duration_minutes=self.duration_minutes,
            distance_km=self.distance_km,
            difficulty_rating=self.difficulty_rating,
            pain_level=self.pain_level,
            pain_areas=frozenset(self.pain_areas),
        )


class CheckInSchema(BaseModel):
    """Today's check-in."""

    soreness: int = Field(default=0, ge=0, le=10)
    sleep_quality: int = Field(default=3, ge=1, le=5)
    pain_now_level: int = Field(default=0, ge=0, le=10)
    pain_now_areas: List[str] = Field(default_factory=list)

    def to_domain(self) -> TodayCheckIn:
        return TodayCheckIn(
            soreness=self.soreness,
            sleep_quality=self.sleep_quality,
            pain_now_level=self.pain_now_level,
            pain_now_areas=frozenset(self.pain_now_areas),
        )


class AdvisorInput(BaseModel):
    """Everything the engine needs for one runner."""

    profile: ProfileSchema
    runs: List[RunSchema] = Field(default_factory=list)
    check_in: Optional[CheckInSchema] = None
