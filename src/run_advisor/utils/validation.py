"""
Input validation for values typed into profile, run and check-in forms.

The engine assumes well-formed inputs; these helpers are what the entry
surfaces use before building engine models. Every validator either returns
the parsed value or raises ``ValidationError``. None of them silently
substitute a default.
"""

from typing import Optional

from ..config import EngineConfig, get_config
from ..exceptions import ErrorCode, InvalidDistanceError, InvalidDurationError, ValidationError
from ..models.profile import DistanceUnit

MAX_DISPLAY_NAME_LENGTH = 50
MAX_DURATION_MINUTES = 1000


def _parse_number(text: str, field: str) -> float:
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        raise InvalidDistanceError(f"{field.replace('_', ' ').capitalize()} is required", field=field)
    try:
        return float(cleaned)
    except ValueError:
        raise InvalidDistanceError(f"'{text}' is not a number", field=field)


def validate_distance(
    text: str,
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
    config: Optional[EngineConfig] = None,
    field: str = "distance",
) -> float:
    """
    Parse a distance entered in ``unit`` and return kilometers.

    Accepts a comma as decimal separator. Must be between 0 and the
    maximum reasonable distance (500 km).

    Raises:
        InvalidDistanceError: If the text is empty, not a number or out of range
    """
    limit = (config or get_config()).safety.max_reasonable_distance_km
    value_km = unit.to_km(_parse_number(text, field))
    if not 0 <= value_km <= limit:
        raise InvalidDistanceError(f"Distance must be between 0 and {limit:.0f} km", field=field)
    return value_km


def validate_weekly_volume(
    text: str,
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
    config: Optional[EngineConfig] = None,
) -> float:
    """Parse a typical weekly volume; at most 300 km."""
    config = config or get_config()
    limit = config.safety.max_reasonable_weekly_km
    distance = validate_distance(text, unit, config, field="weekly_volume")
    if distance > limit:
        raise InvalidDistanceError(f"Weekly volume must be at most {limit:.0f} km", field="weekly_volume")
    return distance


def validate_display_name(name: str) -> str:
    """Trimmed display name of 1-50 characters."""
    trimmed = name.strip()
    if not trimmed or len(trimmed) > MAX_DISPLAY_NAME_LENGTH:
        raise ValidationError(
            f"Name must be 1-{MAX_DISPLAY_NAME_LENGTH} characters",
            field="display_name",
            code=ErrorCode.INVALID_NAME,
        )
    return trimmed


def parse_duration(text: str) -> float:
    """
    Parse an ``mm:ss`` duration into seconds.

    Raises:
        InvalidDurationError: Unless minutes are 0-999 and seconds 0-59
    """
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise InvalidDurationError(f"'{text}' is not in mm:ss format")
    try:
        minutes, seconds = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidDurationError(f"'{text}' is not in mm:ss format")
    if not (0 <= minutes < MAX_DURATION_MINUTES and 0 <= seconds < 60):
        raise InvalidDurationError(f"'{text}' is out of range")
    return float(minutes * 60 + seconds)


def validate_rating(value: int, low: int, high: int, field: str = "rating") -> int:
    """Check an integer rating lies in [low, high]."""
    if not low <= value <= high:
        raise ValidationError(
            f"{field.replace('_', ' ').capitalize()} must be between {low} and {high}",
            field=field,
            code=ErrorCode.INVALID_RATING,
        )
    return value
