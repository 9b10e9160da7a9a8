"""Configuration settings for the run advisor engine.

Every threshold, weight and increment used by the engine lives here, in a
single frozen settings object. Engine entry points take it as an optional
``config`` argument so tests can inject overridden thresholds.

Environment overrides use the ``RUN_ADVISOR_`` prefix with ``__`` between
nested names, e.g. ``RUN_ADVISOR_SAFETY__CRITICAL_PAIN=7``.
"""

from functools import lru_cache
from typing import Tuple

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class ReadinessThresholds(BaseModel):
    """Readiness score bands (0-100)."""

    model_config = ConfigDict(frozen=True)

    full_rest: float = 20.0         # below: complete rest day
    light_activity: float = 40.0    # below: mobility work or a short easy run
    easy_run: float = 60.0          # goal-less progression starts here
    normal_run: float = 70.0        # at or above: normal run
    tempo: float = 75.0             # minimum for tempo work
    high: float = 80.0              # distance bonus above this


class ReadinessWeights(BaseModel):
    """Weights of the readiness formula."""

    model_config = ConfigDict(frozen=True)

    base: float = 50.0
    rest_day_bonus: float = 10.0        # points per rest day
    soreness_impact: float = 2.0        # per point, 0-10 scale
    sleep_quality_bonus: float = 3.0    # per point, 1-5 scale
    pain_impact: float = 3.0            # per point of current pain, 0-10 scale
    session_load_factor: float = 0.3    # applied to difficulty x duration
    pain_penalty_per_point: float = 5.0
    pain_penalty_factor: float = 0.5


class ExperienceFactors(BaseModel):
    """Recovery multipliers applied to the rest bonus."""

    model_config = ConfigDict(frozen=True)

    beginner: float = 0.7
    intermediate: float = 1.0
    advanced: float = 1.3


class DistanceProgression(BaseModel):
    """Target distance progression rules (kilometers)."""

    model_config = ConfigDict(frozen=True)

    beginner_increment: float = 0.5
    normal_increment: float = 1.0

    # Goal-aware regime, keyed by progress toward the goal distance
    early_progress: float = 0.5
    mid_progress: float = 0.8
    early_increment_beginner: float = 0.3
    early_increment: float = 0.5
    early_cap: float = 0.6
    mid_increment_beginner: float = 0.5
    mid_increment: float = 0.8
    mid_cap: float = 0.9
    late_growth: float = 1.05

    # Readiness multipliers
    high_readiness_multiplier: float = 1.1
    normal_readiness_multiplier: float = 1.0
    low_readiness_multiplier: float = 0.7
    very_low_readiness_multiplier: float = 0.5

    max_increase_ratio: float = 1.2     # vs. recent average, also the long-run cut
    beginner_longest_multiplier: float = 1.1
    beginner_cap_floor: float = 5.0
    short_run_ratio: float = 0.5
    short_run_max: float = 4.0
    min_run_distance: float = 2.0


class SafetyThresholds(BaseModel):
    """Pain, difficulty and sanity limits."""

    model_config = ConfigDict(frozen=True)

    critical_pain: int = 8
    moderate_pain: int = 6
    very_hard_difficulty: int = 4
    post_run_pain_concern: int = 6
    high_risk_areas: Tuple[str, ...] = ("Knees", "Shins", "Achilles")
    max_reasonable_distance_km: float = 500.0
    max_reasonable_weekly_km: float = 300.0


class LoadSettings(BaseModel):
    """Weekly load accounting."""

    model_config = ConfigDict(frozen=True)

    window_days: int = 7
    recent_runs: int = 5
    typical_volume_multiplier: float = 1.5
    recent_volume_multiplier: float = 1.1
    tempo_min_runs: int = 2
    tempo_max_avg_difficulty: float = 3.5


class PaceSettings(BaseModel):
    """Pace baseline and relative categorization."""

    model_config = ConfigDict(frozen=True)

    baseline_weeks: int = 8
    baseline_min_runs: int = 3
    normal_band_pct: float = 5.0
    fast_band_pct: float = 15.0
    upgrade_min_runs: int = 10
    upgrade_sample_size: int = 5
    upgrade_improvement_pct: float = 10.0


class ProgressionRules(BaseModel):
    """Baseline gate and level-up rules."""

    model_config = ConfigDict(frozen=True)

    required_runs: int = 3
    weeks_to_intermediate: int = 8
    auto_upgrade_min_runs: int = 5
    auto_upgrade_min_days: int = 60
    auto_upgrade_distance_multiplier: float = 2.5


class EngineConfig(BaseSettings):
    """Complete engine configuration loaded from defaults and environment."""

    model_config = SettingsConfigDict(
        env_prefix="RUN_ADVISOR_",
        env_nested_delimiter="__",
        frozen=True,
    )

    readiness: ReadinessThresholds = ReadinessThresholds()
    weights: ReadinessWeights = ReadinessWeights()
    experience: ExperienceFactors = ExperienceFactors()
    distance: DistanceProgression = DistanceProgression()
    safety: SafetyThresholds = SafetyThresholds()
    load: LoadSettings = LoadSettings()
    pace: PaceSettings = PaceSettings()
    progression: ProgressionRules = ProgressionRules()


@lru_cache
def get_config() -> EngineConfig:
    """
    Get cached configuration instance.

    Raises:
        ConfigurationError: If an environment override does not validate
    """
    try:
        return EngineConfig()
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid engine configuration: {e.error_count()} error(s)",
            details={"errors": [err["msg"] for err in e.errors()]},
        )
