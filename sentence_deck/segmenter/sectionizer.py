"""Sectionizer for splitting reading content at headings."""

import logging
import os
import re
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class HeadingHeuristics:
    """Thresholds for detecting headings that carry no # marker."""

    title_case_ratio: float = 0.4
    max_length: int = 120

    def __post_init__(self):
        """Validate configuration values."""
        if self.title_case_ratio < 0.0:
            self.title_case_ratio = 0.0
        elif self.title_case_ratio > 1.0:
            self.title_case_ratio = 1.0

        if self.max_length < 1:
            self.max_length = 1

    @classmethod
    def from_env(cls) -> "HeadingHeuristics":
        """Create heuristics from environment variables."""
        return cls(
            title_case_ratio=float(os.getenv("HEADING_TITLE_CASE_RATIO", "0.4")),
            max_length=int(os.getenv("HEADING_MAX_LENGTH", "120")),
        )


@dataclass
class Section:
    """A heading-delimited chunk of a reading."""

    subtitle: Optional[str]  # Cleaned heading text, None before the first heading
    content: str  # Raw lines joined with newlines


class Sectionizer:
    """Splits content into sections at explicit and inferred headings."""

    def __init__(self, heuristics: HeadingHeuristics = None):
        self.heuristics = heuristics or HeadingHeuristics()

        self.heading_pattern = re.compile(r"^(#{1,6})\s+(.+)$")
        self.numbered_list_pattern = re.compile(r"^\d+\.\s+")
        self.bullet_list_pattern = re.compile(r"^[-*+]\s+")
        self.title_word_pattern = re.compile(r"^(?:[A-ZÁÉÍÓÚÜÑ¿¡]|\d)")
        self.sentence_end_pattern = re.compile(r"[.!?؛؟]$")
        self.question_end_pattern = re.compile(r"[?¿!¡]$")
        self.link_pattern = re.compile(r"\[([^\]]+)\]\([^)]+\)")

    def sectionize(self, content: str) -> List[Section]:
        """
        Partition content into sections, keeping fenced code intact.

        Args:
            content: Raw reading body

        Returns:
            Sections in document order
        """
        lines = content.split("\n")
        sections = []
        current_subtitle = None
        current_content = []
        inside_code_block = False

        for i, line in enumerate(lines):
            trimmed = line.strip()

            # Fence lines are content, never headings
            if trimmed.startswith("```"):
                inside_code_block = not inside_code_block
                current_content.append(line)
                continue

            if inside_code_block:
                current_content.append(line)
                continue

            heading_match = self.heading_pattern.match(trimmed)
            if heading_match or self._looks_like_heading(lines, i, trimmed):
                if current_content:
                    sections.append(
                        Section(subtitle=current_subtitle, content="\n".join(current_content))
                    )
                    current_content = []

                raw_subtitle = heading_match.group(2) if heading_match else trimmed
                current_subtitle = self.clean_heading(raw_subtitle)
            elif trimmed:
                current_content.append(line)
            elif current_content:
                # Blank line kept for paragraph separation
                current_content.append("")

        if current_content:
            sections.append(Section(subtitle=current_subtitle, content="\n".join(current_content)))

        logger.debug(f"Sectionized content into {len(sections)} sections")
        return sections

    def _looks_like_heading(self, lines: List[str], index: int, trimmed: str) -> bool:
        """Heuristic: short, isolated, mostly title-cased line without terminal punctuation."""
        if not trimmed or len(trimmed) > self.heuristics.max_length:
            return False

        if self.heading_pattern.match(trimmed):
            return False

        if self.numbered_list_pattern.match(trimmed) or self.bullet_list_pattern.match(trimmed):
            return False

        prev_is_blank = index == 0 or not lines[index - 1].strip()
        next_is_blank = index == len(lines) - 1 or not lines[index + 1].strip()
        if not (prev_is_blank and next_is_blank):
            return False

        words = trimmed.split()
        title_words = [w for w in words if self.title_word_pattern.match(w)]
        ratio = len(title_words) / len(words)
        starts_with_inverted = trimmed[0] in "¿¡"
        if ratio < self.heuristics.title_case_ratio and not starts_with_inverted:
            return False

        # Question and exclamation headings are allowed
        if self.sentence_end_pattern.search(trimmed):
            return bool(self.question_end_pattern.search(trimmed))

        return True

    def clean_heading(self, text: str) -> str:
        """
        Strip # markers, emphasis and link markup from heading text.

        Args:
            text: Raw heading text

        Returns:
            Display text for the subtitle
        """
        cleaned = re.sub(r"^#{1,6}\s+", "", text)
        cleaned = cleaned.replace("**", "").replace("*", "")
        cleaned = self.link_pattern.sub(r"\1", cleaned)
        return cleaned.strip()
