"""Block segmenter turning one section into an ordered list of slides."""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from .sectionizer import Section
from .sentence_extractor import SentenceExtractor
from .slides import (BlockquoteSlide, BulletSlide, CheckboxSlide, CodeSlide,
                     FootnoteDefSlide, ImageSlide, MathBlockSlide, ProseSlide,
                     Slide, SlideIdCounter, SubtitleIntroSlide, TableSlide)

logger = logging.getLogger(__name__)


@dataclass
class SegmenterConfig:
    """Configuration for block segmentation."""

    flush_unclosed_code_blocks: bool = True
    flush_trailing_tables: bool = True
    default_code_language: str = "text"
    spaces_per_indent: int = 2

    def __post_init__(self):
        """Validate configuration values."""
        if self.spaces_per_indent < 1:
            self.spaces_per_indent = 1
        if not self.default_code_language:
            self.default_code_language = "text"

    @classmethod
    def from_env(cls) -> "SegmenterConfig":
        """Create configuration from environment variables."""
        return cls(
            flush_unclosed_code_blocks=os.getenv("FLUSH_UNCLOSED_CODE_BLOCKS", "true").lower() == "true",
            flush_trailing_tables=os.getenv("FLUSH_TRAILING_TABLES", "true").lower() == "true",
        )


@dataclass
class _SegmentState:
    """Per-section accumulators; discarded when the section is done."""

    title: str
    subtitle: Optional[str]
    id_counter: SlideIdCounter
    slides: List[Slide] = field(default_factory=list)

    # Code fence
    inside_code_block: bool = False
    code_block_lines: List[str] = field(default_factory=list)
    code_language: str = ""

    # Pipe table
    table_lines: List[str] = field(default_factory=list)

    # Prose
    current_paragraph: List[str] = field(default_factory=list)

    # Lists
    bullet_history_by_level: Dict[int, List[str]] = field(default_factory=dict)
    last_parent_bullet: Optional[str] = None
    parent_is_numbered: bool = False
    parent_number_index: int = 0
    last_indent_level: int = 0

    @property
    def inside_table(self) -> bool:
        return bool(self.table_lines)

    def end_list(self):
        """Forget every list level and the remembered parent item."""
        self.bullet_history_by_level.clear()
        self.last_parent_bullet = None
        self.parent_is_numbered = False
        self.parent_number_index = 0


class BlockSegmenter:
    """Segments section content into typed slides in a single forward pass."""

    def __init__(self, config: SegmenterConfig = None, sentence_extractor: SentenceExtractor = None):
        self.config = config or SegmenterConfig()
        self.sentence_extractor = sentence_extractor or SentenceExtractor()

        self.horizontal_rule_pattern = re.compile(r"^[-*_]{3,}$")
        self.table_row_pattern = re.compile(r"^\|(.+)\|$")
        self.image_pattern = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")
        self.blockquote_pattern = re.compile(r"^>\s*(.+)$")
        self.checkbox_pattern = re.compile(r"^[-*+]\s+\[([ xX])\]\s+(.+)$")
        self.footnote_def_pattern = re.compile(r"^\[\^([^\]]+)\]:\s+(.+)$")
        self.block_math_pattern = re.compile(r"^\$\$(.+)\$\$$")
        self.bullet_pattern = re.compile(r"^[-*+]\s+(.+)$")
        self.numbered_pattern = re.compile(r"^(\d+)\.\s+(.+)$")
        self.label_pattern = re.compile(r"^(?=.{3,120}$)([A-ZÁÉÍÓÚÜÑ¿¡][^:]{1,80}):\s+(.+)$")

    def segment(self, section: Section, title: str, id_counter: SlideIdCounter) -> List[Slide]:
        """
        Convert one section into slides.

        Args:
            section: Section produced by the sectionizer
            title: Document title copied onto every slide
            id_counter: Counter shared by all sections of the document

        Returns:
            Slides for this section in presentation order
        """
        state = _SegmentState(title=title, subtitle=section.subtitle, id_counter=id_counter)

        if section.subtitle:
            # The subtitle is the content of its intro slide, not its header
            state.slides.append(
                SubtitleIntroSlide(
                    id=id_counter.next_id(),
                    title=title,
                    subtitle=None,
                    sentence=section.subtitle,
                )
            )

        for line in section.content.split("\n"):
            self._process_line(line, state)

        self._finish_section(state)
        return state.slides

    def _process_line(self, line: str, state: _SegmentState):
        trimmed = line.strip()

        if trimmed.startswith("```"):
            self._flush_table(state)
            self._toggle_code_fence(trimmed, state)
            return

        if state.inside_code_block:
            state.code_block_lines.append(line)
            return

        table_match = self.table_row_pattern.match(trimmed)
        if state.inside_table and not table_match:
            self._flush_table(state)

        indent_level = self._indent_level(line)

        if self.horizontal_rule_pattern.match(trimmed):
            self._flush_paragraph(state)
            return

        if table_match:
            if not state.inside_table:
                self._flush_paragraph(state)
            state.table_lines.append(trimmed)
            return

        image_match = self.image_pattern.match(trimmed)
        if image_match:
            self._flush_paragraph(state)
            alt, url = image_match.group(1), image_match.group(2)
            self._emit(state, ImageSlide, alt or "Image", image_url=url, image_alt=alt)
            return

        blockquote_match = self.blockquote_pattern.match(trimmed)
        if blockquote_match:
            self._flush_paragraph(state)
            self._emit(state, BlockquoteSlide, blockquote_match.group(1))
            return

        checkbox_match = self.checkbox_pattern.match(trimmed)
        if checkbox_match:
            self._flush_paragraph(state)
            self._emit(
                state,
                CheckboxSlide,
                checkbox_match.group(2).strip(),
                is_checked=checkbox_match.group(1).lower() == "x",
            )
            return

        footnote_match = self.footnote_def_pattern.match(trimmed)
        if footnote_match:
            self._flush_paragraph(state)
            footnote_text = footnote_match.group(2).strip()
            self._emit(
                state,
                FootnoteDefSlide,
                footnote_text,
                footnote_id=footnote_match.group(1).strip(),
                footnote_text=footnote_text,
            )
            return

        math_match = self.block_math_pattern.match(trimmed)
        if math_match:
            self._flush_paragraph(state)
            math_content = math_match.group(1).strip()
            self._emit(state, MathBlockSlide, math_content, math_content=math_content)
            return

        bullet_match = self.bullet_pattern.match(trimmed)
        numbered_match = None if bullet_match else self.numbered_pattern.match(trimmed)
        if bullet_match:
            self._flush_paragraph(state)
            self._add_bullet(state, bullet_match.group(1).strip(), indent_level)
            return
        if numbered_match:
            self._flush_paragraph(state)
            self._add_bullet(
                state,
                numbered_match.group(2).strip(),
                indent_level,
                number=int(numbered_match.group(1)),
            )
            return

        label_match = self.label_pattern.match(trimmed)
        if label_match:
            self._flush_paragraph(state)
            text = f"{label_match.group(1).strip()}: {label_match.group(2).strip()}"
            self._add_bullet(state, text, 0)
            return

        if not trimmed:
            self._flush_paragraph(state)
            # Whitespace-only lines may continue an indented list
            if not line:
                state.end_list()
            return

        # Plain prose ends any list in progress
        state.bullet_history_by_level.clear()
        state.current_paragraph.append(trimmed)

    def _indent_level(self, line: str) -> int:
        leading = len(line) - len(line.lstrip())
        return leading // self.config.spaces_per_indent

    def _toggle_code_fence(self, trimmed: str, state: _SegmentState):
        if not state.inside_code_block:
            state.inside_code_block = True
            state.code_language = trimmed[3:].strip() or self.config.default_code_language
            state.code_block_lines = []
            return

        state.inside_code_block = False
        self._emit_code_block(state)

    def _emit_code_block(self, state: _SegmentState):
        if state.code_block_lines:
            self._emit(
                state,
                CodeSlide,
                "\n".join(state.code_block_lines),
                code_language=state.code_language,
            )
        state.code_block_lines = []
        state.code_language = ""

    def _flush_table(self, state: _SegmentState):
        if not state.table_lines:
            return

        table_lines = state.table_lines
        state.table_lines = []

        # Header row plus separator row at minimum
        if len(table_lines) < 2:
            logger.debug(f"Dropping table with {len(table_lines)} line(s)")
            return

        headers = self._split_row(table_lines[0])
        rows = [self._split_row(row) for row in table_lines[2:]]
        self._emit(
            state,
            TableSlide,
            f"Table: {', '.join(headers)}",
            table_headers=headers,
            table_rows=rows,
        )

    def _split_row(self, row: str) -> List[str]:
        return [cell.strip() for cell in row.split("|")[1:-1]]

    def _flush_paragraph(self, state: _SegmentState):
        if not state.current_paragraph:
            return

        paragraph_text = " ".join(state.current_paragraph).strip()
        state.current_paragraph = []

        for sentence in self.sentence_extractor.extract_sentences(paragraph_text):
            self._emit(state, ProseSlide, sentence)

    def _add_bullet(
        self,
        state: _SegmentState,
        text: str,
        indent_level: int,
        number: Optional[int] = None,
    ):
        """
        Record a list item and emit its slide.

        Args:
            state: Section state
            text: Item text with list marker removed
            indent_level: Nesting depth of the item
            number: Literal leading number for numbered items
        """
        if not text:
            return

        is_numbered = number is not None

        # A change of depth invalidates the history of deeper levels
        if indent_level != state.last_indent_level:
            for level in [lvl for lvl in state.bullet_history_by_level if lvl > indent_level]:
                del state.bullet_history_by_level[level]
            state.last_indent_level = indent_level

        if indent_level == 0:
            state.last_parent_bullet = text
            state.parent_is_numbered = is_numbered
            state.parent_number_index = number if is_numbered else 0

        history = state.bullet_history_by_level.setdefault(indent_level, [])
        previous = list(history)
        history.append(text)

        has_parent = indent_level > 0 and state.last_parent_bullet is not None
        self._emit(
            state,
            BulletSlide,
            text,
            bullet_history=previous,
            is_numbered_list=is_numbered,
            indent_level=indent_level,
            parent_bullet=state.last_parent_bullet if has_parent else None,
            parent_is_numbered=state.parent_is_numbered if has_parent else None,
            parent_number_index=(
                state.parent_number_index if has_parent and state.parent_is_numbered else None
            ),
        )

    def _finish_section(self, state: _SegmentState):
        if self.config.flush_trailing_tables:
            self._flush_table(state)
        else:
            state.table_lines = []

        self._flush_paragraph(state)

        if state.inside_code_block:
            if self.config.flush_unclosed_code_blocks:
                logger.debug("Flushing unclosed code block at end of section")
                self._emit_code_block(state)
            else:
                logger.debug("Dropping unclosed code block at end of section")
                state.code_block_lines = []
            state.inside_code_block = False

    def _emit(self, state: _SegmentState, slide_class: Type[Slide], sentence: str, **fields):
        state.slides.append(
            slide_class(
                id=state.id_counter.next_id(),
                title=state.title,
                subtitle=state.subtitle,
                sentence=sentence,
                **fields,
            )
        )
