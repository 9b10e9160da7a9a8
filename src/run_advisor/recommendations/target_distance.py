"""
Target Distance Progression

Produces the distance for the next run. Two regimes:

- Goal-aware: when the goal implies a distance, progress toward it in
  three phases (<50%, 50-80%, >80% of the goal), each with its own cap.
- Goal-less: add a flat per-level increment once readiness allows it.

The result is scaled by readiness, then clamped by the weekly budget, a
1.2x ceiling over the recent average, a beginner cap, and a 2.0 km floor.
"""

import math
from typing import Optional

from ..config import EngineConfig, get_config
from ..models.profile import RunnerProfile


def round_distance(distance_km: float) -> float:
    """Round to one decimal, halves away from zero."""
    return math.floor(distance_km * 10 + 0.5) / 10


def readiness_multiplier(readiness: float, config: Optional[EngineConfig] = None) -> float:
    """Scale applied to the base distance for a readiness score."""
    config = config or get_config()
    thresholds = config.readiness
    progression = config.distance

    if readiness >= thresholds.high:
        return progression.high_readiness_multiplier
    if readiness >= thresholds.easy_run:
        return progression.normal_readiness_multiplier
    if readiness >= thresholds.light_activity:
        return progression.low_readiness_multiplier
    return progression.very_low_readiness_multiplier


def goal_base_distance(
    avg_recent_distance: float,
    goal_distance: float,
    is_beginner: bool,
    config: Optional[EngineConfig] = None,
) -> float:
    """Base distance in the goal-aware regime."""
    rules = (config or get_config()).distance
    progress = avg_recent_distance / goal_distance

    if progress < rules.early_progress:
        increment = rules.early_increment_beginner if is_beginner else rules.early_increment
        return min(avg_recent_distance + increment, goal_distance * rules.early_cap)
    if progress < rules.mid_progress:
        increment = rules.mid_increment_beginner if is_beginner else rules.mid_increment
        return min(avg_recent_distance + increment, goal_distance * rules.mid_cap)
    return min(avg_recent_distance * rules.late_growth, goal_distance)


def calculate_target_distance(
    profile: RunnerProfile,
    avg_recent_distance: float,
    remaining_weekly_budget: float,
    readiness: float,
    config: Optional[EngineConfig] = None,
) -> float:
    """
    Calculate the target distance for the next run.

    Args:
        profile: Runner profile (level, goal, longest run)
        avg_recent_distance: Mean of the most recent runs, km
        remaining_weekly_budget: Safe weekly maximum minus this week's volume, km
        readiness: Readiness score (0-100)
        config: Engine configuration

    Returns:
        Distance in km, rounded to 0.1, never below the 2.0 km floor. When
        the budget is at least the floor the result never exceeds it.
    """
    config = config or get_config()
    rules = config.distance
    is_beginner = profile.is_beginner

    goal_distance = profile.primary_goal.target_distance_km
    if goal_distance is not None:
        base_distance = goal_base_distance(avg_recent_distance, goal_distance, is_beginner, config)
    elif readiness >= config.readiness.easy_run:
        increment = rules.beginner_increment if is_beginner else rules.normal_increment
        base_distance = avg_recent_distance + increment
    else:
        base_distance = avg_recent_distance

    target = base_distance * readiness_multiplier(readiness, config)
    target = min(target, remaining_weekly_budget)
    target = min(target, avg_recent_distance * rules.max_increase_ratio)

    if is_beginner:
        beginner_cap = max(
            profile.longest_run_km * rules.beginner_longest_multiplier,
            rules.beginner_cap_floor,
        )
        target = min(target, beginner_cap)

    target = max(rules.min_run_distance, target)
    return _round_within(target, remaining_weekly_budget)


def calculate_short_run_distance(
    avg_recent_distance: float,
    remaining_weekly_budget: float,
    config: Optional[EngineConfig] = None,
) -> float:
    """Short recovery run: about half the recent average, at most 4 km."""
    rules = (config or get_config()).distance
    distance = min(
        avg_recent_distance * rules.short_run_ratio,
        remaining_weekly_budget,
        rules.short_run_max,
    )
    distance = max(rules.min_run_distance, distance)
    return _round_within(distance, remaining_weekly_budget)


def _round_within(distance_km: float, ceiling_km: float) -> float:
    rounded = round_distance(distance_km)
    if rounded > ceiling_km >= distance_km:
        return math.floor(distance_km * 10) / 10
    return rounded
