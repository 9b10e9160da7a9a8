"""
Injury Risk Guard

Runs before any training suggestion. When a rule fires, the engine returns
a rest-with-injury-advice recommendation and computes nothing further.
"""

import logging
from typing import Iterable, Optional, Set

from ..config import EngineConfig, get_config
from ..models.profile import RunSummary, TodayCheckIn
from ..models.recommendation import SessionRecommendation, SessionType

logger = logging.getLogger(__name__)


def _rest(explanation: str, warning: str) -> SessionRecommendation:
    return SessionRecommendation(
        type=SessionType.REST_WITH_INJURY_ADVICE,
        explanation=explanation,
        distance_km=None,
        warnings=(warning,),
    )


def _normalize_areas(areas: Iterable[str]) -> Set[str]:
    """Trimmed, case-insensitive body area labels."""
    return {area.strip().casefold() for area in areas} - {""}


def check_injury_risk(
    last_run: Optional[RunSummary],
    today: Optional[TodayCheckIn] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[SessionRecommendation]:
    """
    Check for pain signals that override any training suggestion.

    Rules, first match wins:
    1. Current pain >= critical threshold (8)
    2. Current pain >= moderate threshold (6) in a high-risk area
       (knees, shins, Achilles); area labels match ignoring case
       and surrounding whitespace
    3. The last run's recorded pain >= critical threshold

    Rules 1-2 are only evaluated when a check-in exists; rule 3 only when
    there is a last run.

    Args:
        last_run: Most recent completed run, if any
        today: Today's check-in, if any
        config: Engine configuration

    Returns:
        A terminal rest recommendation, or None if no rule applies
    """
    config = config or get_config()
    safety = config.safety

    if today is not None:
        if today.pain_now_level >= safety.critical_pain:
            logger.debug(f"Injury guard: current pain {today.pain_now_level} is critical")
            return _rest(
                "You reported significant pain. Rest today and consider seeing a doctor if pain persists.",
                "High pain level - do not run",
            )

        high_risk = _normalize_areas(safety.high_risk_areas)
        if today.pain_now_level >= safety.moderate_pain and high_risk & _normalize_areas(today.pain_now_areas):
            logger.debug("Injury guard: moderate pain in a high-risk area")
            return _rest(
                "You have pain in a high-risk area. Rest today to prevent injury.",
                "Pain in critical area - rest recommended",
            )

    if last_run is not None and last_run.pain_level >= safety.critical_pain:
        logger.debug(f"Injury guard: last run pain {last_run.pain_level} is critical")
        return _rest(
            "Your last run caused significant pain. Take a rest day and monitor how you feel.",
            "Previous run caused pain",
        )

    return None
