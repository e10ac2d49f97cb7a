"""Data models for decoded .splice patterns."""

from splicedrum.models.pattern import Pattern, format_tempo
from splicedrum.models.track import STEP_COUNT, TrackRecord, render_steps

__all__ = [
    "Pattern",
    "TrackRecord",
    "STEP_COUNT",
    "format_tempo",
    "render_steps",
]
