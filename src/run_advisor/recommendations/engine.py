"""
Next Session Recommendation

Orchestrates the decision for the runner's next session:

    injury guard -> baseline gate -> weekly load -> readiness
    -> readiness gates -> target distance -> classification -> explanation

Every call is a pure function of its inputs. ``now`` defaults to the
current time; pass it explicitly for reproducible results.
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..analysis.weekly import (
    average_recent_distance,
    calculate_weekly_budget,
    calculate_weekly_stats,
    sort_newest_first,
)
from ..config import EngineConfig, get_config
from ..models.profile import RunnerProfile, RunSummary, TodayCheckIn
from ..models.recommendation import SessionRecommendation, SessionType
from .explain import explain_session
from .injury import check_injury_risk
from .readiness import calculate_readiness, days_between
from .session import classify_session
from .target_distance import calculate_short_run_distance, calculate_target_distance

logger = logging.getLogger(__name__)

CONVERSATIONAL_PACE_WARNING = "Run at a pace where you can hold a conversation"
EXCEEDED_VOLUME_WARNING = "You've exceeded your safe weekly volume"


def baseline_recommendation(
    runs_completed: int,
    config: Optional[EngineConfig] = None,
) -> SessionRecommendation:
    """Recommendation while the runner has too few runs for personalization."""
    required = (config or get_config()).progression.required_runs
    remaining = max(0, required - runs_completed)

    if runs_completed == 0:
        message = (
            f"Welcome! Complete your first {required} runs at an easy pace so we can "
            "learn your fitness level and give you personalized recommendations."
        )
    elif runs_completed == 1:
        message = f"Great first run! Complete {remaining} more easy runs so we can personalize your training."
    elif runs_completed == 2:
        message = "One more run to go! After this, you'll unlock personalized recommendations."
    else:
        message = f"Complete {remaining} more runs to unlock personalized recommendations."

    return SessionRecommendation(
        type=SessionType.NEEDS_MORE_RUNS,
        explanation=message,
        distance_km=None,
        warnings=(CONVERSATIONAL_PACE_WARNING,),
    )


def _rest(explanation: str, warnings: List[str]) -> SessionRecommendation:
    return SessionRecommendation(
        type=SessionType.FULL_REST,
        explanation=explanation,
        distance_km=None,
        warnings=tuple(warnings),
    )


def next_session(
    profile: RunnerProfile,
    recent_runs: Sequence[RunSummary],
    today: Optional[TodayCheckIn] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> SessionRecommendation:
    """
    Recommend the runner's next session.

    The injury guard runs before the three-run baseline gate, so pain
    yields rest advice even for a runner with 0-2 runs.

    Args:
        profile: Runner profile
        recent_runs: Run history in any order (typically the latest 50)
        today: Today's check-in, if the runner completed one
        now: Reference time (defaults to the current time)
        config: Engine configuration

    Returns:
        SessionRecommendation. Rest, mobility and baseline sessions carry no
        distance; run sessions carry a distance of at least 2.0 km that fits
        in the remaining weekly budget.
    """
    config = config or get_config()
    now = now or datetime.now()
    runs = sort_newest_first(recent_runs)
    last_run = runs[0] if runs else None

    injury = check_injury_risk(last_run, today, config)
    if injury is not None:
        return injury

    if len(runs) < config.progression.required_runs:
        logger.debug(f"Baseline gate: {len(runs)} runs")
        return baseline_recommendation(len(runs), config)

    weekly_stats = calculate_weekly_stats(runs, now, config)
    avg_recent = average_recent_distance(runs, config)
    budget = calculate_weekly_budget(profile, runs, now, config, weekly_stats)
    readiness = calculate_readiness(profile, last_run, today, now, config)
    days_since_last_run = days_between(last_run.date, now)

    logger.debug(
        f"Readiness {readiness:.1f}, avg recent {avg_recent:.2f} km, "
        f"remaining budget {budget.remaining_km:.2f} km, {days_since_last_run} days since last run"
    )

    warnings: List[str] = []
    if budget.exceeded:
        warnings.append(EXCEEDED_VOLUME_WARNING)

    thresholds = config.readiness
    min_distance = config.distance.min_run_distance

    if readiness < thresholds.full_rest:
        return _rest("Your body needs rest today. Recovery is when you get stronger!", warnings)

    if readiness < thresholds.light_activity:
        if profile.is_beginner:
            return SessionRecommendation(
                type=SessionType.STRENGTH_AND_MOBILITY,
                explanation="Take it easy today. Light stretching or mobility work is ideal.",
                distance_km=None,
                warnings=tuple(warnings),
            )
        if budget.remaining_km < min_distance:
            return _rest("You've reached your safe weekly volume. Rest and recover today.", warnings)
        return SessionRecommendation(
            type=SessionType.EASY_RUN,
            explanation="A short recovery run if you feel up to it, otherwise rest.",
            distance_km=calculate_short_run_distance(avg_recent, budget.remaining_km, config),
            warnings=tuple(warnings),
        )

    if days_since_last_run == 0:
        return _rest("You already ran today. Rest and recover for tomorrow!", warnings)

    if weekly_stats.run_count >= profile.runs_per_week:
        return _rest("You've hit your weekly run target. Take a rest day!", warnings)

    if budget.remaining_km < min_distance:
        return _rest("You've reached your safe weekly volume. Rest and recover today.", warnings)

    target = calculate_target_distance(profile, avg_recent, budget.remaining_km, readiness, config)
    session_type = classify_session(profile, readiness, target, avg_recent, weekly_stats, config)
    logger.debug(f"Classified {session_type.value} at {target} km")

    return SessionRecommendation(
        type=session_type,
        explanation=explain_session(session_type, profile, target),
        distance_km=target,
        warnings=tuple(warnings),
    )
