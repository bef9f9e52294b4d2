"""FastMCP server exposing reading segmentation tools."""

from mcp.server.fastmcp import FastMCP

from sentence_deck.cli.config import Config
from sentence_deck.segmenter.processor import DeckProcessor
from sentence_deck.utils.logging_config import setup_logging

from . import deck_api


def create_server(config: Config) -> FastMCP:
    """Build an MCP server whose tools share one configured processor."""
    processor = DeckProcessor(
        heuristics=config.heading_heuristics,
        segmenter_config=config.segmenter_config,
        pacing_config=config.pacing_config,
    )
    mcp = FastMCP(config.mcp_server_name)

    @mcp.tool()
    async def segment_document(title: str, content: str) -> str:
        """
        WHEN TO USE: Turn a Markdown reading into the ordered slide sequence shown by
        the one-sentence-at-a-time reader.

        Each slide is a JSON object with id, title, subtitle and sentence, plus one
        kind flag (isSubtitleIntro, isBulletPoint, isCodeBlock, isBlockquote, isImage,
        isTable, isCheckbox, isFootnoteDef, isMathBlock) and its attributes. Prose
        sentences carry no flag.

        Args:
            title: Reading title, copied onto every slide
            content: Markdown-flavored body text

        Returns:
            JSON with "slides" and a "sections" index of subtitle intro slides
        """
        return deck_api.segment_document(processor, title, content)

    @mcp.tool()
    async def estimate_reading_time(title: str, content: str, words_per_minute: int = 0) -> str:
        """
        WHEN TO USE: Estimate how long a reading takes with auto-advance enabled.

        Args:
            title: Reading title
            content: Markdown-flavored body text
            words_per_minute: Reading speed (100-400); 0 uses the server default

        Returns:
            JSON with per-slide durations in milliseconds and the total
        """
        return deck_api.estimate_reading_time(
            processor, title, content, words_per_minute or None
        )

    return mcp


def start_server(config: Config):
    """Start the MCP server over stdio."""
    # Silent logging keeps stdio clean for the protocol
    setup_logging(verbose=False)
    create_server(config).run()


if __name__ == "__main__":
    start_server(Config())
