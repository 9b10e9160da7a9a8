"""Training history analysis: weekly load, relative pace and level progression."""

from .weekly import (
    average_recent_distance,
    calculate_safe_weekly_max,
    calculate_weekly_budget,
    calculate_weekly_stats,
    sort_newest_first,
)
from .relative_pace import (
    RelativePaceCategory,
    RunPaceFeedback,
    analyze_run,
    calculate_average_pace,
    categorize_pace,
    get_encouragement,
    should_suggest_upgrade,
)
from .progression import (
    NO_SUGGESTION,
    UpgradeSuggestion,
    UpgradeSuggestionTracker,
    accept_suggestion,
    calculate_consistency_progress,
    check_for_auto_upgrade,
    dismiss_suggestion,
    meets_auto_upgrade_criteria,
)

__all__ = [
    # Weekly load
    "average_recent_distance",
    "calculate_safe_weekly_max",
    "calculate_weekly_budget",
    "calculate_weekly_stats",
    "sort_newest_first",
    # Relative pace
    "RelativePaceCategory",
    "RunPaceFeedback",
    "analyze_run",
    "calculate_average_pace",
    "categorize_pace",
    "get_encouragement",
    "should_suggest_upgrade",
    # Progression
    "NO_SUGGESTION",
    "UpgradeSuggestion",
    "UpgradeSuggestionTracker",
    "accept_suggestion",
    "calculate_consistency_progress",
    "check_for_auto_upgrade",
    "dismiss_suggestion",
    "meets_auto_upgrade_criteria",
]
