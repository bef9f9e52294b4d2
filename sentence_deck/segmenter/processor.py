"""Main orchestration for turning readings into slide decks."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..pacing.duration import PacingConfig, count_words, estimate_deck_duration_ms
from .block_segmenter import BlockSegmenter, SegmenterConfig
from .parser import DocumentParser
from .sectionizer import HeadingHeuristics, Sectionizer
from .slides import Slide, SlideIdCounter, SlideKind

logger = logging.getLogger(__name__)


class DeckProcessor:
    """Runs the sectionizer and block segmenter over whole readings."""

    def __init__(
        self,
        heuristics: HeadingHeuristics = None,
        segmenter_config: SegmenterConfig = None,
        pacing_config: PacingConfig = None,
    ):
        """
        Initialize the deck processor.

        Args:
            heuristics: Thresholds for headings without # markers
            segmenter_config: Block segmentation options
            pacing_config: Reading speed used for duration statistics
        """
        self.parser = DocumentParser()
        self.sectionizer = Sectionizer(heuristics)
        self.block_segmenter = BlockSegmenter(segmenter_config)
        self.pacing_config = pacing_config or PacingConfig()

    def process_content(self, title: str, content: str) -> List[Slide]:
        """
        Segment a reading into slides.

        Args:
            title: Reading title copied onto every slide
            content: Markdown-flavored body text

        Returns:
            Slides with ids 0..n-1 in presentation order
        """
        sections = self.sectionizer.sectionize(content)
        id_counter = SlideIdCounter()

        slides = []
        for section in sections:
            slides.extend(self.block_segmenter.segment(section, title, id_counter))

        logger.debug(f"Generated {len(slides)} slides from {len(sections)} sections")
        return slides

    def process_file(self, file_path: Union[str, Path], title: str = None) -> List[Slide]:
        """
        Load a Markdown reading from disk and segment it.

        Args:
            file_path: Path to the Markdown file
            title: Title override (defaults to frontmatter title or file stem)

        Returns:
            Slides for the file, or an empty list if it could not be parsed
        """
        file_path = Path(file_path)
        logger.debug(f"Processing file: {file_path}")

        parse_result = self.parser.parse_file(file_path, title=title)
        if not parse_result.success:
            logger.warning(f"Failed to parse file {file_path}: {parse_result.error}")
            return []

        document = parse_result.document
        slides = self.process_content(document.title, document.content)
        logger.info(f"Generated {len(slides)} slides from {file_path}")
        return slides

    def get_section_index(self, slides: List[Slide]) -> List[Dict[str, Any]]:
        """
        List where each titled section starts.

        Args:
            slides: Processed slides

        Returns:
            One entry per subtitle intro slide with its subtitle and slide id
        """
        return [
            {"subtitle": slide.sentence, "slide_id": slide.id}
            for slide in slides
            if slide.kind == SlideKind.SUBTITLE_INTRO
        ]

    def get_deck_stats(self, slides: List[Slide]) -> Dict[str, Any]:
        """
        Get statistics about a processed deck.

        Args:
            slides: Processed slides

        Returns:
            Dictionary with slide counts, word totals and reading time
        """
        if not slides:
            return {
                "total_slides": 0,
                "slide_kinds": {},
                "total_sections": 0,
                "total_word_count": 0,
                "estimated_duration_ms": 0,
            }

        slide_kinds = {}
        total_words = 0
        for slide in slides:
            kind = slide.kind.value
            slide_kinds[kind] = slide_kinds.get(kind, 0) + 1
            total_words += count_words(slide.sentence)

        return {
            "total_slides": len(slides),
            "slide_kinds": slide_kinds,
            "total_sections": len(self.get_section_index(slides)),
            "total_word_count": total_words,
            "estimated_duration_ms": estimate_deck_duration_ms(slides, self.pacing_config),
        }


def process_content(title: str, content: str) -> List[Slide]:
    """Segment a reading with default settings."""
    return DeckProcessor().process_content(title, content)
