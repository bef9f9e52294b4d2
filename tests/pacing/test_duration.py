"""Tests for auto-advance duration estimates."""

from sentence_deck.pacing.duration import (PacingConfig,
                                           estimate_deck_duration_ms,
                                           estimate_duration_ms,
                                           format_duration)
from sentence_deck.segmenter.slides import (CodeSlide, ImageSlide, ProseSlide,
                                            SubtitleIntroSlide, TableSlide)

FIFTY_WORDS = " ".join(["word"] * 50)


def prose(text):
    return ProseSlide(id=0, title="Doc", subtitle=None, sentence=text)


class TestPacingConfig:
    """Test reading speed configuration."""

    def test_words_per_minute_clamped(self):
        """Reading speed is kept within 100-400 wpm."""
        assert PacingConfig(words_per_minute=50).words_per_minute == 100
        assert PacingConfig(words_per_minute=1000).words_per_minute == 400
        assert PacingConfig(words_per_minute=250).words_per_minute == 250

    def test_from_env(self, monkeypatch):
        """Reading speed can come from the environment."""
        monkeypatch.setenv("WORDS_PER_MINUTE", "300")

        assert PacingConfig.from_env().words_per_minute == 300


class TestEstimateDuration:
    """Test per-slide durations."""

    def test_short_slide_uses_minimum(self):
        """Short sentences stay up for at least three seconds."""
        assert estimate_duration_ms(prose("Hi.")) == 3000

    def test_word_rate(self):
        """Fifty words at 200 wpm take fifteen seconds."""
        assert estimate_duration_ms(prose(FIFTY_WORDS)) == 15000

    def test_code_doubles_words(self):
        """Code counts each word twice."""
        slide = CodeSlide(id=0, title="Doc", subtitle=None, sentence=FIFTY_WORDS)

        assert estimate_duration_ms(slide) == 30000

    def test_table_multiplier(self):
        """Tables count 1.4 times their words."""
        slide = TableSlide(id=0, title="Doc", subtitle=None, sentence=FIFTY_WORDS)

        assert estimate_duration_ms(slide) == 21000

    def test_subtitle_minimum_words(self):
        """Subtitle intros count at least eight words."""
        config = PacingConfig(words_per_minute=100)
        intro = SubtitleIntroSlide(id=0, title="Doc", subtitle=None, sentence="Intro")

        assert estimate_duration_ms(intro, config) == 4800
        assert estimate_duration_ms(prose("Intro"), config) == 3000

    def test_character_rate(self):
        """Long words are timed by characters."""
        assert estimate_duration_ms(prose("a" * 500)) == 30000

    def test_image_fixed(self):
        """Images always get five seconds."""
        slide = ImageSlide(id=0, title="Doc", subtitle=None, sentence=FIFTY_WORDS * 10)

        assert estimate_duration_ms(slide) == 5000

    def test_maximum(self):
        """Durations are capped at one minute."""
        assert estimate_duration_ms(prose(" ".join(["word"] * 1000))) == 60000

    def test_deck_total(self):
        """Deck duration is the sum of slide durations."""
        slides = [prose("Hi."), prose(FIFTY_WORDS)]

        assert estimate_deck_duration_ms(slides) == 18000


class TestFormatDuration:
    """Test duration formatting."""

    def test_format(self):
        """Minutes are shown only when present."""
        assert format_duration(65000) == "1m 05s"
        assert format_duration(42000) == "42s"
        assert format_duration(0) == "0s"
