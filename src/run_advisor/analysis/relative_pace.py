"""
Relative Pace Analysis

Judges a run's pace against the runner's own recent baseline rather than
absolute standards, and turns that into encouragement. Also detects
sustained pace improvement worth a level-up suggestion.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from ..config import EngineConfig, get_config
from ..metrics.pace import Pace
from ..models.profile import RunSummary

logger = logging.getLogger(__name__)


class RelativePaceCategory(str, Enum):
    """Pace relative to the runner's baseline."""
    VERY_FAST = "very_fast"
    FAST = "fast"
    NORMAL = "normal"
    EASY = "easy"
    RECOVERY = "recovery"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def color(self) -> str:
        colors = {
            RelativePaceCategory.VERY_FAST: "purple",
            RelativePaceCategory.FAST: "blue",
            RelativePaceCategory.NORMAL: "green",
            RelativePaceCategory.EASY: "orange",
            RelativePaceCategory.RECOVERY: "gray",
        }
        return colors[self]

    @property
    def description(self) -> str:
        descriptions = {
            RelativePaceCategory.VERY_FAST: "This was a hard effort for you",
            RelativePaceCategory.FAST: "This was faster than your usual pace",
            RelativePaceCategory.NORMAL: "This was your typical training pace",
            RelativePaceCategory.EASY: "This was an easy effort for you",
            RelativePaceCategory.RECOVERY: "This was a nice recovery pace",
        }
        return descriptions[self]

    @property
    def advice(self) -> str:
        """Default encouragement for the category."""
        advice = {
            RelativePaceCategory.VERY_FAST: "Great work! Make sure to balance hard efforts with easy days.",
            RelativePaceCategory.FAST: "Nice pickup! Remember to recover properly before your next hard run.",
            RelativePaceCategory.NORMAL: "Solid run at your comfortable pace. Perfect for building fitness.",
            RelativePaceCategory.EASY: "Perfect! Easy runs build your aerobic base safely.",
            RelativePaceCategory.RECOVERY: "Smart pacing! Recovery runs help you adapt and improve.",
        }
        return advice[self]


REST_MESSAGE = "Listen to your body. Rest and recovery are part of training!"
STRONGER_MESSAGE = "Amazing! You're getting stronger - this pace felt easier than before!"
HARDER_MESSAGE = "This felt harder than usual. Make sure you're getting enough rest and recovery."
BALANCE_MESSAGE = "Perfect balance! This is exactly the kind of sustainable training that builds fitness."


@dataclass(frozen=True)
class RunPaceFeedback:
    """Relative pace verdict for a single run."""

    pace: Pace
    baseline: Pace
    percent_difference: float
    category: RelativePaceCategory
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pace_sec_per_km": round(self.pace.seconds_per_km, 1),
            "baseline_sec_per_km": round(self.baseline.seconds_per_km, 1),
            "percent_difference": round(self.percent_difference, 1),
            "category": self.category.value,
            "message": self.message,
        }


def run_pace(run: RunSummary) -> Pace:
    return Pace.from_distance_km(run.distance_km, run.duration_seconds)


def _distance_weighted_pace(runs: Sequence[RunSummary]) -> Optional[Pace]:
    total_distance = sum(run.distance_km for run in runs)
    if total_distance <= 0:
        return None
    total_seconds = sum(run.duration_seconds for run in runs)
    return Pace.from_distance_km(total_distance, total_seconds)


def calculate_average_pace(
    runs: Sequence[RunSummary],
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[Pace]:
    """
    Baseline pace over the trailing window (8 weeks by default).

    Distance-weighted: total distance over total duration, so one long slow
    run counts for more than a short fast one.

    Returns:
        Baseline pace, or None with fewer than 3 runs in the window
    """
    config = config or get_config()
    now = now or datetime.now()
    window_start = now - timedelta(weeks=config.pace.baseline_weeks)

    relevant = [run for run in runs if window_start <= run.date <= now]
    if len(relevant) < config.pace.baseline_min_runs:
        return None
    return _distance_weighted_pace(relevant)


def categorize_pace(
    pace: Pace,
    baseline: Pace,
    config: Optional[EngineConfig] = None,
) -> RelativePaceCategory:
    """
    Bucket a pace by its percent difference from the baseline.

    Buckets (percent, negative = faster):
        < -15 very fast, [-15, -5) fast, [-5, 5] normal, (5, 15) easy, >= 15 recovery
    """
    config = config or get_config()
    normal_band = config.pace.normal_band_pct
    fast_band = config.pace.fast_band_pct
    difference = pace.percentage_difference(baseline)

    if difference < -fast_band:
        return RelativePaceCategory.VERY_FAST
    if difference < -normal_band:
        return RelativePaceCategory.FAST
    if difference <= normal_band:
        return RelativePaceCategory.NORMAL
    if difference < fast_band:
        return RelativePaceCategory.EASY
    return RelativePaceCategory.RECOVERY


def get_encouragement(
    category: RelativePaceCategory,
    difficulty: Optional[int] = None,
    pain: Optional[int] = None,
    config: Optional[EngineConfig] = None,
) -> str:
    """
    Encouragement text for a run.

    Post-run pain at or above the concern threshold overrides everything.
    Otherwise a few category/difficulty combinations get special messages,
    falling back to the category's default advice.
    """
    config = config or get_config()

    if pain is not None and pain >= config.safety.post_run_pain_concern:
        return REST_MESSAGE

    if difficulty is not None:
        fast = category in (RelativePaceCategory.FAST, RelativePaceCategory.VERY_FAST)
        slow = category in (RelativePaceCategory.EASY, RelativePaceCategory.RECOVERY)

        if fast and difficulty <= 2:
            return STRONGER_MESSAGE
        if slow and difficulty >= config.safety.very_hard_difficulty:
            return HARDER_MESSAGE
        if category is RelativePaceCategory.NORMAL and difficulty == 3:
            return BALANCE_MESSAGE

    return category.advice


def analyze_run(
    run: RunSummary,
    history: Sequence[RunSummary],
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[RunPaceFeedback]:
    """Compare one run against the baseline built from ``history``."""
    config = config or get_config()
    baseline = calculate_average_pace(history, now, config)
    if baseline is None:
        return None

    pace = run_pace(run)
    category = categorize_pace(pace, baseline, config)
    return RunPaceFeedback(
        pace=pace,
        baseline=baseline,
        percent_difference=pace.percentage_difference(baseline),
        category=category,
        message=get_encouragement(category, run.difficulty_rating, run.pain_level, config),
    )


def should_suggest_upgrade(
    runs: Sequence[RunSummary],
    config: Optional[EngineConfig] = None,
) -> bool:
    """
    Whether pace has improved enough to suggest a level-up.

    Compares the distance-weighted pace of the earliest five runs with the
    latest five. The latest must be at least 10% faster.
    """
    config = config or get_config()
    if len(runs) < config.pace.upgrade_min_runs:
        return False

    sample = config.pace.upgrade_sample_size
    chronological = sorted(runs, key=lambda run: run.date)
    early = _distance_weighted_pace(chronological[:sample])
    recent = _distance_weighted_pace(chronological[-sample:])
    if early is None or recent is None:
        return False

    improvement = recent.percentage_difference(early)
    logger.debug(f"Pace change early->recent: {improvement:.1f}%")
    return improvement <= -config.pace.upgrade_improvement_pct
