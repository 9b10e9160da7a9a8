"""
Readiness Score Calculation

Combines rest since the last run, that run's load and pain, same-day
subjective state and experience level into a single 0-100 score.

    readiness = base
              + days_since_last_run x rest_bonus x experience_factor
              + sleep x 3 - soreness x 2 - current_pain x 3
              - difficulty x duration x 0.3
              - last_pain x 5 x 0.5
"""

from datetime import datetime
from typing import Optional

from ..config import EngineConfig, get_config
from ..models.profile import ExperienceLevel, RunnerProfile, RunSummary, TodayCheckIn


def days_between(start: datetime, end: datetime) -> int:
    """Whole calendar days from ``start`` to ``end``; never negative."""
    return max(0, (end.date() - start.date()).days)


def experience_factor(level: ExperienceLevel, config: Optional[EngineConfig] = None) -> float:
    """Recovery multiplier for an experience level."""
    factors = (config or get_config()).experience
    if level is ExperienceLevel.BEGINNER:
        return factors.beginner
    if level is ExperienceLevel.INTERMEDIATE:
        return factors.intermediate
    if level is ExperienceLevel.ADVANCED:
        return factors.advanced
    raise ValueError(f"Unknown experience level: {level}")


def calculate_today_modifier(
    today: Optional[TodayCheckIn],
    config: Optional[EngineConfig] = None,
) -> float:
    """Adjustment from today's check-in; 0 without one."""
    if today is None:
        return 0.0
    weights = (config or get_config()).weights
    return (
        today.sleep_quality * weights.sleep_quality_bonus
        - today.soreness * weights.soreness_impact
        - today.pain_now_level * weights.pain_impact
    )


def calculate_readiness(
    profile: RunnerProfile,
    last_run: RunSummary,
    today: Optional[TodayCheckIn] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> float:
    """
    Calculate readiness for the next session.

    Args:
        profile: Runner profile (experience level)
        last_run: Most recent completed run
        today: Optional same-day check-in
        now: Reference time (defaults to the current time)
        config: Engine configuration

    Returns:
        Readiness score clamped to [0, 100]
    """
    config = config or get_config()
    weights = config.weights
    now = now or datetime.now()

    rest_bonus = (
        days_between(last_run.date, now)
        * weights.rest_day_bonus
        * experience_factor(profile.experience_level, config)
    )
    session_load = last_run.difficulty_rating * last_run.duration_minutes
    pain_penalty = last_run.pain_level * weights.pain_penalty_per_point

    readiness = (
        weights.base
        + rest_bonus
        + calculate_today_modifier(today, config)
        - session_load * weights.session_load_factor
        - pain_penalty * weights.pain_penalty_factor
    )
    return max(0.0, min(100.0, readiness))
