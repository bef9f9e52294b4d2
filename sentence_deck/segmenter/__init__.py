"""Segmentation engine converting Markdown readings into presentation slides."""

from .block_segmenter import BlockSegmenter, SegmenterConfig
from .parser import Document, DocumentParser, ParseResult
from .processor import DeckProcessor, process_content
from .sectionizer import HeadingHeuristics, Section, Sectionizer
from .sentence_extractor import SentenceExtractor, extract_sentences
from .slides import (BlockquoteSlide, BulletSlide, CheckboxSlide, CodeSlide,
                     FootnoteDefSlide, ImageSlide, MathBlockSlide, ProseSlide,
                     Slide, SlideIdCounter, SlideKind, SubtitleIntroSlide,
                     TableSlide)
from .tags import normalize_tags, validate_tag

__all__ = [
    "BlockSegmenter",
    "SegmenterConfig",
    "Document",
    "DocumentParser",
    "ParseResult",
    "DeckProcessor",
    "process_content",
    "HeadingHeuristics",
    "Section",
    "Sectionizer",
    "SentenceExtractor",
    "extract_sentences",
    "Slide",
    "SlideKind",
    "SlideIdCounter",
    "ProseSlide",
    "SubtitleIntroSlide",
    "BulletSlide",
    "CodeSlide",
    "BlockquoteSlide",
    "ImageSlide",
    "TableSlide",
    "CheckboxSlide",
    "FootnoteDefSlide",
    "MathBlockSlide",
    "normalize_tags",
    "validate_tag",
]
