"""Auto-advance timing for slides."""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..segmenter.slides import Slide

# Slide kinds with special timing. Plain strings equal to the SlideKind values;
# importing SlideKind here would create an import cycle with the segmenter.
IMAGE_KIND = "image"
CODE_KIND = "code"
TABLE_KIND = "table"
SUBTITLE_INTRO_KIND = "subtitle_intro"


@dataclass
class PacingConfig:
    """Reading-speed policy for auto-advance."""

    words_per_minute: int = 200
    min_words_per_minute: int = 100
    max_words_per_minute: int = 400
    chars_per_word: int = 5
    code_word_multiplier: float = 2.0
    table_word_multiplier: float = 1.4
    subtitle_min_words: int = 8
    image_duration_ms: int = 5000
    min_duration_ms: int = 3000
    max_duration_ms: int = 60000

    def __post_init__(self):
        """Clamp reading speed into the supported range."""
        if self.words_per_minute > self.max_words_per_minute:
            self.words_per_minute = self.max_words_per_minute
        elif self.words_per_minute < self.min_words_per_minute:
            self.words_per_minute = self.min_words_per_minute

    @classmethod
    def from_env(cls) -> "PacingConfig":
        """Create configuration from environment variables."""
        return cls(words_per_minute=int(os.getenv("WORDS_PER_MINUTE", "200")))


def count_words(text: str) -> int:
    return len(text.split())


def estimate_duration_ms(slide: "Slide", config: PacingConfig = None) -> int:
    """
    Compute how long a slide stays on screen before auto-advancing.

    The estimate is the larger of a word-rate and a character-rate reading
    time, clamped to the configured bounds. Images use a fixed duration.

    Args:
        slide: Slide to time
        config: Pacing policy (defaults to 200 words per minute)

    Returns:
        Duration in milliseconds
    """
    config = config or PacingConfig()

    if slide.kind == IMAGE_KIND:
        return config.image_duration_ms

    words = float(count_words(slide.sentence))
    if slide.kind == CODE_KIND:
        words *= config.code_word_multiplier
    elif slide.kind == TABLE_KIND:
        words *= config.table_word_multiplier
    elif slide.kind == SUBTITLE_INTRO_KIND:
        words = max(words, config.subtitle_min_words)

    word_ms = words * 60000 / config.words_per_minute
    chars_per_minute = config.words_per_minute * config.chars_per_word
    char_ms = len(slide.sentence) * 60000 / chars_per_minute

    duration = int(round(max(word_ms, char_ms)))
    return max(config.min_duration_ms, min(config.max_duration_ms, duration))


def estimate_deck_duration_ms(slides: Iterable["Slide"], config: PacingConfig = None) -> int:
    """Total auto-advance time for a sequence of slides."""
    config = config or PacingConfig()
    return sum(estimate_duration_ms(slide, config) for slide in slides)


def format_duration(duration_ms: int) -> str:
    """Format milliseconds as "3m 05s" or "42s"."""
    total_seconds = int(round(duration_ms / 1000))
    minutes, seconds = divmod(total_seconds, 60)
    if minutes:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"
