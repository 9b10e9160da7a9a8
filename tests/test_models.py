"""Tests for profile models, update helpers and input schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from run_advisor.models.profile import (
    DistanceUnit,
    ExperienceLevel,
    GoalType,
    PrimaryGoal,
    update_custom_goal_distance,
    update_distance_unit,
    update_experience_level,
    update_goal_description,
    update_primary_goal,
)
from run_advisor.models.schemas import AdvisorInput, RunSchema

from conftest import make_profile


class TestGoals:
    """Test goal distances."""

    @pytest.mark.parametrize("goal,distance", [
        (GoalType.RACE_5K, 5.0),
        (GoalType.RACE_10K, 10.0),
        (GoalType.RACE_HALF_MARATHON, 21.1),
        (GoalType.RACE_MARATHON, 42.2),
        (GoalType.GENERAL_FITNESS, None),
        (GoalType.WEIGHT_LOSS, None),
        (GoalType.NONE, None),
    ])
    def test_standard_distances(self, goal, distance):
        assert PrimaryGoal(goal).target_distance_km == distance

    def test_personal_best(self):
        assert PrimaryGoal(GoalType.PERSONAL_BEST).target_distance_km is None
        assert PrimaryGoal(GoalType.PERSONAL_BEST, 15.0).target_distance_km == 15.0
        assert PrimaryGoal(GoalType.PERSONAL_BEST).is_race_or_pr

    def test_custom_distance_ignored_for_races(self):
        assert PrimaryGoal(GoalType.RACE_5K, 8.0).target_distance_km == 5.0

    def test_display_names(self):
        assert GoalType.RACE_HALF_MARATHON.display_name == "Half Marathon"
        assert ExperienceLevel.ADVANCED.display_name == "Advanced"


class TestDistanceUnit:
    """Test unit conversions."""

    def test_conversions(self):
        assert DistanceUnit.KILOMETERS.from_km(5.0) == 5.0
        assert DistanceUnit.MILES.from_km(10.0) == pytest.approx(6.21371)
        assert DistanceUnit.MILES.to_km(1.0) == pytest.approx(1.609344, abs=1e-4)
        assert DistanceUnit.MILES.from_meters(1609.34) == pytest.approx(1.0)
        assert DistanceUnit.KILOMETERS.from_meters(2500) == 2.5
        assert DistanceUnit.MILES.abbreviation == "mi"


class TestProfileUpdates:
    """Profile update helpers return new profiles."""

    def test_updates(self):
        profile = make_profile()
        updated = update_experience_level(profile, ExperienceLevel.ADVANCED)
        assert updated.experience_level == ExperienceLevel.ADVANCED
        assert profile.experience_level == ExperienceLevel.INTERMEDIATE

        assert update_distance_unit(profile, DistanceUnit.MILES).distance_unit == DistanceUnit.MILES
        goal = PrimaryGoal(GoalType.RACE_10K)
        assert update_primary_goal(profile, goal).primary_goal == goal

    def test_goal_description_trimmed(self):
        profile = make_profile()
        assert update_goal_description(profile, "  Run a 10k  ").goal_description == "Run a 10k"
        assert update_goal_description(profile, "   ").goal_description is None
        assert update_goal_description(profile, None).goal_description is None

    def test_custom_goal_distance(self):
        profile = make_profile(goal=GoalType.PERSONAL_BEST)
        updated = update_custom_goal_distance(profile, 8.0)
        assert updated.primary_goal.target_distance_km == 8.0
        assert updated.primary_goal.type == GoalType.PERSONAL_BEST

    def test_to_dict(self):
        data = make_profile(goal=GoalType.RACE_5K).to_dict()
        assert data["primary_goal"] == "race_5k"
        assert data["experience_level"] == "intermediate"


class TestSchemas:
    """Test JSON input validation."""

    def test_to_domain(self):
        data = AdvisorInput.model_validate({
            "profile": {
                "uid": "abc",
                "display_name": "Sam",
                "experience_level": "beginner",
                "primary_goal": "personal_best",
                "custom_goal_distance_km": 8,
            },
            "runs": [
                {"date": "2025-03-10T08:00:00", "duration_minutes": 30, "distance_km": 5, "pain_areas": ["Knees"]},
            ],
            "check_in": {"sleep_quality": 4},
        })
        profile = data.profile.to_domain()
        run = data.runs[0].to_domain()

        assert profile.is_beginner
        assert profile.primary_goal.target_distance_km == 8
        assert run.pain_areas == frozenset({"Knees"})
        assert run.duration_seconds == 1800
        assert data.check_in.to_domain().sleep_quality == 4

    @pytest.mark.parametrize("field,value", [
        ("distance_km", 0),
        ("duration_minutes", -5),
        ("difficulty_rating", 6),
        ("pain_level", 11),
    ])
    def test_run_bounds(self, field, value):
        raw = {"date": "2025-03-10T08:00:00", "duration_minutes": 30, "distance_km": 5}
        raw[field] = value
        with pytest.raises(PydanticValidationError):
            RunSchema.model_validate(raw)
