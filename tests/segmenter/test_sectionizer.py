"""Tests for the heading-based sectionizer."""

from sentence_deck.segmenter.sectionizer import (HeadingHeuristics, Section,
                                                 Sectionizer)


class TestSectionizer:
    """Test the Sectionizer component."""

    def test_content_without_headings(self):
        """Content with no headings becomes one section without subtitle."""
        sectionizer = Sectionizer()

        sections = sectionizer.sectionize("Just some text here.\nMore text follows.")

        assert sections == [Section(subtitle=None, content="Just some text here.\nMore text follows.")]

    def test_empty_content(self):
        """Empty content yields no sections."""
        assert Sectionizer().sectionize("") == []

    def test_explicit_headings(self):
        """Markdown headings start new sections and keep blank separators."""
        sectionizer = Sectionizer()

        content = """# One

Alpha.

## Two

Beta."""

        sections = sectionizer.sectionize(content)

        assert sections == [
            Section(subtitle="One", content="Alpha.\n"),
            Section(subtitle="Two", content="Beta."),
        ]

    def test_leading_blank_lines_dropped(self):
        """Blank lines before any content are not kept."""
        sections = Sectionizer().sectionize("\n\nText.")

        assert sections[0].content == "Text."

    def test_heading_without_content_is_skipped(self):
        """A heading with nothing after it does not produce a section."""
        sections = Sectionizer().sectionize("Body text.\n\n# Empty")

        assert sections == [Section(subtitle=None, content="Body text.\n")]

    def test_heading_inside_code_fence_ignored(self):
        """Lines inside a fenced block are never headings."""
        content = """Intro text.
```
# not a heading
```
After."""

        sections = Sectionizer().sectionize(content)

        assert len(sections) == 1
        assert sections[0].subtitle is None
        assert "# not a heading" in sections[0].content
        assert sections[0].content.count("```") == 2

    def test_code_fence_preserves_whitespace_lines(self):
        """Indentation and blank lines inside fences are kept verbatim."""
        content = "```\ndef f():\n\n    return 1\n```"

        sections = Sectionizer().sectionize(content)

        assert sections[0].content == content

    def test_heuristic_heading(self):
        """An isolated, title-cased line without period becomes a subtitle."""
        content = """First paragraph here.

Key Ideas Of The Day

Second paragraph."""

        sections = Sectionizer().sectionize(content)

        assert [s.subtitle for s in sections] == [None, "Key Ideas Of The Day"]
        assert sections[1].content == "Second paragraph."

    def test_heuristic_requires_blank_neighbors(self):
        """Title-cased lines touching other text stay content."""
        content = "Some Title Case Line\nfollowed by text."

        sections = Sectionizer().sectionize(content)

        assert len(sections) == 1
        assert sections[0].subtitle is None

    def test_question_headings_allowed(self):
        """Headings phrased as questions or exclamations are detected."""
        content = """What Is Markdown?

Body.

¿qué es esto?

Más texto."""

        sections = Sectionizer().sectionize(content)

        assert [s.subtitle for s in sections] == ["What Is Markdown?", "¿qué es esto?"]

    def test_terminal_period_rejects_heading(self):
        """A title-cased line ending with a period is a sentence."""
        content = """Intro.

This Is A Sentence.

Outro."""

        sections = Sectionizer().sectionize(content)

        assert len(sections) == 1
        assert sections[0].subtitle is None

    def test_list_lines_are_not_headings(self):
        """Isolated list items never become headings."""
        content = """- Item One

1. First Step"""

        sections = Sectionizer().sectionize(content)

        assert len(sections) == 1
        assert sections[0].subtitle is None

    def test_title_case_ratio_threshold(self):
        """The title-case ratio is compared inclusively against the threshold."""
        sectionizer = Sectionizer(HeadingHeuristics(title_case_ratio=0.5))

        at_threshold = sectionizer.sectionize("Big ideas\n\nBody text.")
        below_threshold = sectionizer.sectionize("Big ideas here\n\nBody text.")

        assert at_threshold[0].subtitle == "Big ideas"
        assert below_threshold[0].subtitle is None

    def test_max_length_threshold(self):
        """Lines longer than the maximum length are not headings."""
        short_limit = Sectionizer(HeadingHeuristics(max_length=10))
        default = Sectionizer()

        content = "Short Title\n\nBody text."

        assert short_limit.sectionize(content)[0].subtitle is None
        assert default.sectionize(content)[0].subtitle == "Short Title"

    def test_subtitle_markup_stripped(self):
        """Emphasis and link markup are removed from subtitles."""
        content = "## **Bold** and [Link](http://x.com) *Ital*\n\nBody."

        sections = Sectionizer().sectionize(content)

        assert sections[0].subtitle == "Bold and Link Ital"

    def test_heuristics_clamped(self):
        """Out-of-range thresholds are clamped."""
        heuristics = HeadingHeuristics(title_case_ratio=1.5, max_length=0)

        assert heuristics.title_case_ratio == 1.0
        assert heuristics.max_length == 1

    def test_heuristics_from_env(self, monkeypatch):
        """Thresholds can be loaded from the environment."""
        monkeypatch.setenv("HEADING_TITLE_CASE_RATIO", "0.6")
        monkeypatch.setenv("HEADING_MAX_LENGTH", "80")

        heuristics = HeadingHeuristics.from_env()

        assert heuristics.title_case_ratio == 0.6
        assert heuristics.max_length == 80
