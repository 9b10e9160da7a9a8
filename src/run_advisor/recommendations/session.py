"""
Session Type Classification

Maps readiness, the planned distance and goal context to a session type.
This covers the final branches of the decision order; the gates before it
(injury, baseline, low readiness, already ran, weekly target) live in the
engine.
"""

from typing import Optional

from ..config import EngineConfig, get_config
from ..models.profile import RunnerProfile
from ..models.recommendation import SessionType, WeeklyStats


def is_long_run(
    target_distance: float,
    avg_recent_distance: float,
    config: Optional[EngineConfig] = None,
) -> bool:
    """A run well beyond the recent average counts as a long run."""
    ratio = (config or get_config()).distance.max_increase_ratio
    return target_distance > avg_recent_distance * ratio


def qualifies_for_tempo(
    profile: RunnerProfile,
    readiness: float,
    weekly_stats: WeeklyStats,
    config: Optional[EngineConfig] = None,
) -> bool:
    """
    Tempo work needs a race or PR goal, high readiness, a non-beginner,
    and a week with at least 2 runs that did not feel hard on average.
    """
    config = config or get_config()
    if not profile.primary_goal.is_race_or_pr:
        return False
    if readiness < config.readiness.tempo or profile.is_beginner:
        return False
    return (
        weekly_stats.run_count >= config.load.tempo_min_runs
        and weekly_stats.avg_difficulty < config.load.tempo_max_avg_difficulty
    )


def classify_session(
    profile: RunnerProfile,
    readiness: float,
    target_distance: float,
    avg_recent_distance: float,
    weekly_stats: WeeklyStats,
    config: Optional[EngineConfig] = None,
) -> SessionType:
    """
    Pick the run type for a session that has passed every gate.

    Order, first match wins:
    1. Readiness below 60 -> easy run
    2. Target beyond 1.2x the recent average -> long run
    3. Tempo qualification (see ``qualifies_for_tempo``) -> tempo run
    4. Readiness >= 70 -> normal run, otherwise easy run

    ``SessionType.INTERVALS`` is never produced here.
    """
    config = config or get_config()

    if readiness < config.readiness.easy_run:
        return SessionType.EASY_RUN
    if is_long_run(target_distance, avg_recent_distance, config):
        return SessionType.LONG_RUN
    if qualifies_for_tempo(profile, readiness, weekly_stats, config):
        return SessionType.TEMPO_RUN
    if readiness >= config.readiness.normal_run:
        return SessionType.NORMAL_RUN
    return SessionType.EASY_RUN
