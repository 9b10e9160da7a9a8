"""
Level Progression

Consistency progress toward the next experience level, and the
beginner-to-intermediate auto-upgrade suggestion.

The suggestion is the only state that outlives a single engine call. It is
modelled as an immutable value with pure transitions:

    none --check (criteria met)--> pending(level)
    pending --accept--> none   (profile promoted)
    pending --dismiss--> none

``UpgradeSuggestionTracker`` serializes transitions for callers that share
one suggestion between threads.
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional, Sequence, Tuple

from ..config import EngineConfig, get_config
from ..models.profile import ExperienceLevel, RunnerProfile, RunSummary
from ..models.recommendation import LevelProgress

logger = logging.getLogger(__name__)


def calculate_consistency_progress(
    runs: Sequence[RunSummary],
    weeks_required: Optional[int] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> LevelProgress:
    """
    Count ISO weeks containing at least one run in the trailing window.

    Args:
        runs: Run history in any order
        weeks_required: Window length and goal in weeks (default 8)
        now: Reference time
        config: Engine configuration

    Returns:
        LevelProgress with completed weeks capped at ``weeks_required``
    """
    config = config or get_config()
    now = now or datetime.now()
    if weeks_required is None:
        weeks_required = config.progression.weeks_to_intermediate

    if not runs or weeks_required <= 0:
        return LevelProgress(required_weeks=weeks_required, completed_weeks=0)

    window_start = now - timedelta(weeks=weeks_required - 1)
    week_ids = {
        run.date.isocalendar()[:2]
        for run in runs
        if window_start <= run.date <= now
    }
    return LevelProgress(
        required_weeks=weeks_required,
        completed_weeks=min(len(week_ids), weeks_required),
    )


def meets_auto_upgrade_criteria(
    profile: RunnerProfile,
    runs: Sequence[RunSummary],
    config: Optional[EngineConfig] = None,
) -> bool:
    """
    Whether a beginner has grown enough to suggest intermediate level.

    Requires at least 5 runs spanning 60+ days, with the latest run at least
    2.5x the distance of the earliest.
    """
    config = config or get_config()
    rules = config.progression

    if profile.experience_level is not ExperienceLevel.BEGINNER:
        return False
    if len(runs) < rules.auto_upgrade_min_runs:
        return False

    chronological = sorted(runs, key=lambda run: run.date)
    first, last = chronological[0], chronological[-1]

    if (last.date - first.date).days < rules.auto_upgrade_min_days:
        return False
    if first.distance_km <= 0:
        return False
    return last.distance_km >= first.distance_km * rules.auto_upgrade_distance_multiplier


@dataclass(frozen=True)
class UpgradeSuggestion:
    """Pending level-up suggestion; ``level`` is None when nothing is pending."""

    level: Optional[ExperienceLevel] = None

    @property
    def is_pending(self) -> bool:
        return self.level is not None


NO_SUGGESTION = UpgradeSuggestion()


def check_for_auto_upgrade(
    suggestion: UpgradeSuggestion,
    profile: RunnerProfile,
    runs: Sequence[RunSummary],
    config: Optional[EngineConfig] = None,
) -> UpgradeSuggestion:
    """Raise a pending intermediate suggestion when the criteria are met."""
    if meets_auto_upgrade_criteria(profile, runs, config):
        return UpgradeSuggestion(level=ExperienceLevel.INTERMEDIATE)
    return suggestion


def accept_suggestion(
    suggestion: UpgradeSuggestion,
    profile: RunnerProfile,
) -> Tuple[RunnerProfile, UpgradeSuggestion]:
    """Promote the profile to the suggested level and clear the suggestion."""
    if not suggestion.is_pending:
        return profile, suggestion
    return replace(profile, experience_level=suggestion.level), NO_SUGGESTION


def dismiss_suggestion(suggestion: UpgradeSuggestion) -> UpgradeSuggestion:
    """Clear the suggestion without changing the profile."""
    return NO_SUGGESTION


class UpgradeSuggestionTracker:
    """
    Thread-safe holder for one runner's suggestion.

    Transitions run under a lock. The first accept or dismiss of a pending
    suggestion resolves it; any later resolution finds nothing pending and
    is a no-op that returns False.
    """

    def __init__(self, suggestion: UpgradeSuggestion = NO_SUGGESTION):
        self._suggestion = suggestion
        self._lock = threading.Lock()

    @property
    def suggestion(self) -> UpgradeSuggestion:
        with self._lock:
            return self._suggestion

    def check(
        self,
        profile: RunnerProfile,
        runs: Sequence[RunSummary],
        config: Optional[EngineConfig] = None,
    ) -> UpgradeSuggestion:
        with self._lock:
            self._suggestion = check_for_auto_upgrade(self._suggestion, profile, runs, config)
            if self._suggestion.is_pending:
                logger.info(f"Level upgrade suggested: {self._suggestion.level.value}")
            return self._suggestion

    def accept(self, profile: RunnerProfile) -> Tuple[RunnerProfile, bool]:
        """Returns the (possibly promoted) profile and whether it changed."""
        with self._lock:
            was_pending = self._suggestion.is_pending
            profile, self._suggestion = accept_suggestion(self._suggestion, profile)
            return profile, was_pending

    def dismiss(self) -> bool:
        with self._lock:
            was_pending = self._suggestion.is_pending
            self._suggestion = dismiss_suggestion(self._suggestion)
            return was_pending
