"""
Weekly Load Analysis

Rolling 7-day volume statistics and the safe weekly maximum used to cap
target distances against sudden load spikes.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from ..config import EngineConfig, get_config
from ..models.profile import RunnerProfile, RunSummary
from ..models.recommendation import WeeklyBudget, WeeklyStats


def sort_newest_first(runs: Sequence[RunSummary]) -> List[RunSummary]:
    """Return runs ordered by date, most recent first."""
    return sorted(runs, key=lambda run: run.date, reverse=True)


def runs_in_window(
    runs: Sequence[RunSummary],
    now: datetime,
    days: int,
) -> List[RunSummary]:
    """Runs dated within the trailing ``days`` days up to ``now`` (inclusive)."""
    window_start = now - timedelta(days=days)
    return [run for run in runs if window_start <= run.date <= now]


def calculate_weekly_stats(
    runs: Sequence[RunSummary],
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> WeeklyStats:
    """
    Aggregate the trailing week of runs.

    Args:
        runs: Run history in any order
        now: Reference time (defaults to the current time)
        config: Engine configuration

    Returns:
        WeeklyStats; averages are 0 when the window is empty
    """
    config = config or get_config()
    now = now or datetime.now()

    this_week = runs_in_window(runs, now, config.load.window_days)
    run_count = len(this_week)
    total_distance = sum(run.distance_km for run in this_week)
    total_duration = sum(run.duration_minutes for run in this_week)

    if run_count == 0:
        return WeeklyStats()

    pain_areas = {area.strip() for run in this_week for area in run.pain_areas}
    pain_areas.discard("")

    return WeeklyStats(
        total_distance_km=total_distance,
        run_count=run_count,
        avg_distance_km=total_distance / run_count,
        avg_difficulty=sum(run.difficulty_rating for run in this_week) / run_count,
        total_duration_min=total_duration,
        pain_areas=tuple(sorted(pain_areas)),
    )


def average_recent_distance(
    runs: Sequence[RunSummary],
    config: Optional[EngineConfig] = None,
) -> float:
    """Mean distance of the most recent runs (5 by default); 0 with no runs."""
    config = config or get_config()
    recent = sort_newest_first(runs)[: config.load.recent_runs]
    if not recent:
        return 0.0
    return sum(run.distance_km for run in recent) / len(recent)


def calculate_safe_weekly_max(
    profile: RunnerProfile,
    avg_recent_distance: float,
    config: Optional[EngineConfig] = None,
) -> float:
    """
    Heuristic ceiling on weekly distance.

    The greater of the runner's typical weekly volume x 1.5 and the recent
    average run x runs-per-week target x 1.1.
    """
    config = config or get_config()
    from_history = profile.typical_weekly_km * config.load.typical_volume_multiplier
    from_recent = (
        avg_recent_distance * profile.runs_per_week * config.load.recent_volume_multiplier
    )
    return max(from_history, from_recent)


def calculate_weekly_budget(
    profile: RunnerProfile,
    runs: Sequence[RunSummary],
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
    weekly_stats: Optional[WeeklyStats] = None,
) -> WeeklyBudget:
    """Safe weekly maximum and the distance still available this week."""
    config = config or get_config()
    if weekly_stats is None:
        weekly_stats = calculate_weekly_stats(runs, now, config)

    safe_max = calculate_safe_weekly_max(
        profile, average_recent_distance(runs, config), config
    )
    return WeeklyBudget(
        safe_weekly_max_km=safe_max,
        remaining_km=max(0.0, safe_max - weekly_stats.total_distance_km),
        exceeded=weekly_stats.total_distance_km > safe_max,
    )
