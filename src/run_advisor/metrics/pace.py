"""Pace model and relative pace zones.

Pace is stored as seconds per kilometer. Lower is faster.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from ..models.profile import DistanceUnit

SECONDS_PER_KM_TO_MILE = 1.60934

# Plausible human running pace, seconds per km
MIN_VALID_PACE = 120.0
MAX_VALID_PACE = 1500.0


@total_ordering
@dataclass(frozen=True)
class Pace:
    """A running speed in seconds per kilometer. Never negative."""

    seconds_per_km: float = 0.0

    def __post_init__(self):
        if self.seconds_per_km < 0:
            object.__setattr__(self, "seconds_per_km", 0.0)

    def __lt__(self, other: "Pace") -> bool:
        if not isinstance(other, Pace):
            return NotImplemented
        return self.seconds_per_km < other.seconds_per_km

    @classmethod
    def from_distance_km(cls, distance_km: float, duration_seconds: float) -> "Pace":
        """Pace from a distance in km; non-positive distance gives a zero pace."""
        if distance_km <= 0:
            return cls(0.0)
        return cls(duration_seconds / distance_km)

    @classmethod
    def from_distance_meters(cls, distance_meters: float, duration_seconds: float) -> "Pace":
        if distance_meters <= 0:
            return cls(0.0)
        return cls.from_distance_km(distance_meters / 1000.0, duration_seconds)

    @property
    def seconds_per_mile(self) -> float:
        return self.seconds_per_km * SECONDS_PER_KM_TO_MILE

    @property
    def minutes_per_km(self) -> float:
        return self.seconds_per_km / 60.0

    @property
    def minutes_per_mile(self) -> float:
        return self.seconds_per_mile / 60.0

    @property
    def is_valid(self) -> bool:
        return MIN_VALID_PACE <= self.seconds_per_km <= MAX_VALID_PACE

    def seconds_for(self, unit: DistanceUnit) -> float:
        if unit is DistanceUnit.MILES:
            return self.seconds_per_mile
        return self.seconds_per_km

    def format_without_unit(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> str:
        """Pace as m:ss, or --:-- when the pace is not plausible."""
        if not self.is_valid:
            return "--:--"
        total_seconds = int(self.seconds_for(unit))
        return f"{total_seconds // 60}:{total_seconds % 60:02d}"

    def format(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> str:
        """Pace as m:ss/km or m:ss/mi."""
        return f"{self.format_without_unit(unit)}/{unit.abbreviation}"

    def projected_time(self, distance_km: float) -> float:
        """Seconds needed to cover ``distance_km`` at this pace."""
        return self.seconds_per_km * distance_km

    def projected_distance(self, seconds: float) -> float:
        """Kilometers covered in ``seconds`` at this pace."""
        if self.seconds_per_km <= 0:
            return 0.0
        return seconds / self.seconds_per_km

    def is_faster_than(self, other: "Pace") -> bool:
        return self.seconds_per_km < other.seconds_per_km

    def percentage_difference(self, other: "Pace") -> float:
        """Percent by which this pace differs from ``other`` (negative = faster)."""
        if other.seconds_per_km <= 0:
            return 0.0
        return (self.seconds_per_km - other.seconds_per_km) / other.seconds_per_km * 100


PaceRange = Tuple[Pace, Pace]  # (fast, slow)


@dataclass(frozen=True)
class PaceZones:
    """
    Relative-effort pace bands derived from a baseline pace.

    Each band is a (fast, slow) pair of paces, as multiples of the baseline:
    - Easy: 1.05-1.15 (slower than usual)
    - Tempo: 0.95-1.05
    - Threshold: 0.90-0.95
    - Interval: 0.85-0.90
    """

    baseline: Pace

    def _band(self, fast: float, slow: float) -> PaceRange:
        base = self.baseline.seconds_per_km
        return Pace(base * fast), Pace(base * slow)

    @property
    def easy(self) -> PaceRange:
        return self._band(1.05, 1.15)

    @property
    def tempo(self) -> PaceRange:
        return self._band(0.95, 1.05)

    @property
    def threshold(self) -> PaceRange:
        return self._band(0.90, 0.95)

    @property
    def interval(self) -> PaceRange:
        return self._band(0.85, 0.90)

    def zone_for(self, pace: Pace) -> Optional[str]:
        """Name of the first band containing ``pace``, fastest band first."""
        for name in ("interval", "threshold", "tempo", "easy"):
            fast, slow = getattr(self, name)
            if fast <= pace <= slow:
                return name
        return None

    @staticmethod
    def format_range(zone: PaceRange, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> str:
        fast, slow = zone
        return f"{fast.format_without_unit(unit)} - {slow.format_without_unit(unit)}"

    def to_dict(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> dict:
        """Convert to dictionary for serialization."""
        return {
            name: {
                "fast_sec_per_km": round(getattr(self, name)[0].seconds_per_km, 1),
                "slow_sec_per_km": round(getattr(self, name)[1].seconds_per_km, 1),
                "formatted": self.format_range(getattr(self, name), unit),
            }
            for name in ("easy", "tempo", "threshold", "interval")
        }


def calculate_pace_zones(baseline: Pace) -> PaceZones:
    """Derive the four relative pace bands from a baseline pace."""
    return PaceZones(baseline=baseline)


def format_mmss(seconds: float) -> str:
    """Duration as MM:SS."""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


def format_hhmmss(seconds: float) -> str:
    """Duration as H:MM:SS, or MM:SS under an hour."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
