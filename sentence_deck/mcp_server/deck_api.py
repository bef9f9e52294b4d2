"""Tool implementations for the MCP server."""

import json
import logging
from typing import Optional

from sentence_deck.pacing.duration import (PacingConfig, estimate_duration_ms,
                                           format_duration)
from sentence_deck.segmenter.processor import DeckProcessor

logger = logging.getLogger(__name__)


def segment_document(processor: DeckProcessor, title: str, content: str) -> str:
    """
    Segment a reading and return the deck as JSON.

    Args:
        processor: Configured deck processor
        title: Reading title
        content: Markdown-flavored body

    Returns:
        JSON object with the slides and section index, or an error message
    """
    try:
        slides = processor.process_content(title, content)
        return json.dumps(
            {
                "title": title,
                "slides": [slide.to_dict() for slide in slides],
                "sections": processor.get_section_index(slides),
            },
            ensure_ascii=False,
        )
    except Exception as e:
        logger.error(f"Segmentation failed for '{title}': {e}")
        return json.dumps({"error": f"Error segmenting document: {e}"})


def estimate_reading_time(
    processor: DeckProcessor,
    title: str,
    content: str,
    words_per_minute: Optional[int] = None,
) -> str:
    """
    Estimate per-slide and total auto-advance time for a reading.

    Args:
        processor: Configured deck processor
        title: Reading title
        content: Markdown-flavored body
        words_per_minute: Reading speed override (clamped to 100-400)

    Returns:
        JSON object with per-slide durations and the total, or an error message
    """
    try:
        pacing = processor.pacing_config
        if words_per_minute is not None:
            pacing = PacingConfig(words_per_minute=words_per_minute)

        slides = processor.process_content(title, content)
        durations = [
            {"id": slide.id, "duration_ms": estimate_duration_ms(slide, pacing)}
            for slide in slides
        ]
        total_ms = sum(item["duration_ms"] for item in durations)

        return json.dumps(
            {
                "title": title,
                "words_per_minute": pacing.words_per_minute,
                "total_slides": len(slides),
                "total_duration_ms": total_ms,
                "total_duration": format_duration(total_ms),
                "slides": durations,
            },
            ensure_ascii=False,
        )
    except Exception as e:
        logger.error(f"Reading time estimate failed for '{title}': {e}")
        return json.dumps({"error": f"Error estimating reading time: {e}"})
