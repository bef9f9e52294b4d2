"""Stats command - summarizes the slide deck for a Markdown reading."""

import json
import logging
import sys

from sentence_deck.cli.commands.segment import build_processor
from sentence_deck.cli.config import Config
from sentence_deck.pacing.duration import PacingConfig, format_duration

logger = logging.getLogger(__name__)


def stats_command(config: Config, file_path: str, words_per_minute: int = None):
    """Print slide counts, sections and estimated reading time as JSON."""
    if words_per_minute is not None:
        config.pacing_config = PacingConfig(words_per_minute=words_per_minute)

    processor = build_processor(config)
    parse_result = processor.parser.parse_file(file_path)
    if not parse_result.success:
        logger.error(f"❌ {parse_result.error}")
        sys.exit(1)

    document = parse_result.document
    slides = processor.process_content(document.title, document.content)

    stats = processor.get_deck_stats(slides)
    stats["title"] = document.title
    stats["tags"] = document.tags
    stats["words_per_minute"] = processor.pacing_config.words_per_minute
    stats["estimated_duration"] = format_duration(stats["estimated_duration_ms"])
    stats["sections"] = processor.get_section_index(slides)

    print(json.dumps(stats, ensure_ascii=False, indent=2))
