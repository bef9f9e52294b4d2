"""Segment command - prints the slide deck for a Markdown reading."""

import json
import logging
import sys
from typing import List

from sentence_deck.cli.config import Config
from sentence_deck.segmenter.processor import DeckProcessor
from sentence_deck.segmenter.slides import Slide

logger = logging.getLogger(__name__)


def build_processor(config: Config) -> DeckProcessor:
    return DeckProcessor(
        heuristics=config.heading_heuristics,
        segmenter_config=config.segmenter_config,
        pacing_config=config.pacing_config,
    )


def render_slides_text(slides: List[Slide]) -> str:
    """Render slides one per line as "[id] kind (subtitle) sentence"."""
    lines = []
    for slide in slides:
        header = f"[{slide.id}] {slide.kind.value}"
        if slide.subtitle:
            header += f" ({slide.subtitle})"
        sentence = slide.sentence.replace("\n", "\n    ")
        lines.append(f"{header} {sentence}")
    return "\n".join(lines)


def segment_command(config: Config, file_path: str, title: str = None, output_format: str = None):
    """Segment a Markdown file and print its slides to stdout."""
    output_format = output_format or config.output_format
    if output_format not in ("json", "text"):
        logger.error(f"❌ Unknown output format: {output_format} (expected json or text)")
        sys.exit(1)

    processor = build_processor(config)
    parse_result = processor.parser.parse_file(file_path, title=title)
    if not parse_result.success:
        logger.error(f"❌ {parse_result.error}")
        sys.exit(1)

    document = parse_result.document
    logger.info(f"📄 Segmenting '{document.title}' from {file_path}")

    slides = processor.process_content(document.title, document.content)
    logger.info(f"✅ Generated {len(slides)} slides")

    if output_format == "json":
        print(json.dumps([slide.to_dict() for slide in slides], ensure_ascii=False, indent=2))
    else:
        print(render_slides_text(slides))
