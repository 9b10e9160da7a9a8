"""Recommendation engine for the next training session."""

from .injury import check_injury_risk
from .readiness import calculate_readiness, days_between
from .target_distance import calculate_target_distance
from .session import classify_session
from .explain import explain_session, format_distance
from .engine import next_session

__all__ = [
    "check_injury_risk",
    "calculate_readiness",
    "days_between",
    "calculate_target_distance",
    "classify_session",
    "explain_session",
    "format_distance",
    "next_session",
]
