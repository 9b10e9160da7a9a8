"""Pace metrics."""

from .pace import Pace, PaceZones, calculate_pace_zones, format_hhmmss, format_mmss

__all__ = [
    "Pace",
    "PaceZones",
    "calculate_pace_zones",
    "format_hhmmss",
    "format_mmss",
]
