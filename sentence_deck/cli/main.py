"""Main CLI entry point for sentence-deck."""

import argparse

from sentence_deck.cli.commands.segment import segment_command
from sentence_deck.cli.commands.serve import serve_command
from sentence_deck.cli.commands.stats import stats_command
from sentence_deck.cli.config import Config
from sentence_deck.utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentence-deck",
        description="Sentence Deck - split Markdown readings into one-sentence slides",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser("segment", help="Print the slide deck for a Markdown file")
    segment_parser.add_argument("file", help="Markdown file to segment")
    segment_parser.add_argument("--title", help="Reading title (default: frontmatter title or file name)")
    segment_parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "text"],
        help="Output format (default: OUTPUT_FORMAT or json)",
    )
    segment_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    segment_parser.add_argument("-v", "--verbose", action="store_true", help="Show processing details")

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Summarize slides, sections and reading time")
    stats_parser.add_argument("file", help="Markdown file to analyze")
    stats_parser.add_argument("--wpm", type=int, help="Reading speed in words per minute (100-400)")
    stats_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    stats_parser.add_argument("-v", "--verbose", action="store_true", help="Show processing details")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server exposing segmentation tools")
    serve_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    serve_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show startup messages (default: silent for MCP compatibility)",
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging(verbose=getattr(args, "verbose", False))

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "segment":
        segment_command(config, args.file, title=args.title, output_format=args.output_format)
    elif args.command == "stats":
        stats_command(config, args.file, words_per_minute=args.wpm)
    elif args.command == "serve":
        serve_command(config, verbose=args.verbose)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
