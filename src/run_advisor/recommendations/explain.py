"""
Natural Language Explanations

Renders a session decision into a short rationale. Wording is free; the
interpolated numbers (distance in the runner's unit, goal progress) are
the contract.
"""

from typing import Optional

from ..models.profile import DistanceUnit, RunnerProfile
from ..models.recommendation import SessionType, WeeklyStats


def format_distance(distance_km: float, unit: DistanceUnit) -> str:
    """Distance in the display unit, one decimal, e.g. '3.5 km' or '2.2 mi'."""
    return f"{unit.from_km(distance_km):.1f} {unit.abbreviation}"


def goal_progress_percent(distance_km: float, goal_distance_km: float) -> int:
    """Percent of the goal distance covered by one run, capped at 100."""
    if goal_distance_km <= 0:
        return 0
    return min(100, int(distance_km / goal_distance_km * 100))


CANONICAL_EXPLANATIONS = {
    SessionType.INTERVALS: "Interval workout. Warm up, then alternate between hard efforts and recovery.",
    SessionType.FULL_REST: "Rest day. Your body builds fitness during recovery!",
    SessionType.STRENGTH_AND_MOBILITY: "Light stretching and mobility work today. Give your legs a break.",
    SessionType.REST_WITH_INJURY_ADVICE: "Rest and monitor your pain. If it persists, consider seeing a professional.",
    SessionType.NEEDS_MORE_RUNS: "Complete a few more runs so we can personalize your training.",
}


def explain_session(
    session_type: SessionType,
    profile: RunnerProfile,
    target_distance: Optional[float],
) -> str:
    """
    Generate the explanation for a session.

    Args:
        session_type: Classified session type
        profile: Runner profile (unit, goal)
        target_distance: Planned distance in km, for run sessions

    Returns:
        Human-readable explanation
    """
    if session_type in CANONICAL_EXPLANATIONS or target_distance is None:
        return CANONICAL_EXPLANATIONS.get(
            session_type, f"{session_type.display_name} today."
        )

    distance = format_distance(target_distance, profile.distance_unit)

    if session_type is SessionType.EASY_RUN:
        goal_distance = profile.primary_goal.target_distance_km
        if goal_distance is not None:
            progress = goal_progress_percent(target_distance, goal_distance)
            return (
                f"Easy run of {distance}. You're {progress}% of the way to your "
                f"{profile.primary_goal.display_name} goal distance. Keep it conversational!"
            )
        return (
            f"Easy run of {distance}. Focus on keeping a comfortable pace "
            "where you can hold a conversation."
        )
    if session_type is SessionType.NORMAL_RUN:
        return (
            f"Normal run of {distance}. You're feeling good today - "
            "enjoy a solid effort at your comfortable pace."
        )
    if session_type is SessionType.LONG_RUN:
        return f"Long run of {distance}. This builds your endurance! Start slow and stay relaxed."
    if session_type is SessionType.TEMPO_RUN:
        return (
            f"Tempo run of {distance}. Push yourself to a comfortably hard pace - "
            "challenging but sustainable."
        )
    raise ValueError(f"Unhandled session type: {session_type}")


def summarize_week(stats: WeeklyStats, unit: DistanceUnit) -> str:
    """One-line weekly summary: distance, average difficulty and pain areas."""
    if stats.run_count == 0:
        return "No runs logged yet this week."

    pain = ", ".join(stats.pain_areas) if stats.pain_areas else "none"
    return (
        f"This week: {format_distance(stats.total_distance_km, unit)} over "
        f"{stats.run_count} run{'s' if stats.run_count != 1 else ''}, "
        f"average difficulty {stats.avg_difficulty:.1f} / 5, pain reported: {pain}."
    )
