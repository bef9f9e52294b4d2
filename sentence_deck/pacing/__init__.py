"""Reading-speed pacing for presentation slides."""

from .duration import (PacingConfig, count_words, estimate_deck_duration_ms,
                       estimate_duration_ms, format_duration)

__all__ = [
    "PacingConfig",
    "count_words",
    "estimate_deck_duration_ms",
    "estimate_duration_ms",
    "format_duration",
]
