"""Reading document parser for Markdown files with optional frontmatter."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import frontmatter

from .tags import normalize_tags


@dataclass
class Document:
    """A reading ready for segmentation."""

    title: str
    content: str
    tags: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ParseResult:
    """Result of loading a reading."""

    success: bool
    document: Document = None
    error: str = None
    has_frontmatter: bool = False


class DocumentParser:
    """Loads readings from Markdown text, taking title and tags from frontmatter."""

    def parse_file(self, file_path: Union[str, Path], title: str = None) -> ParseResult:
        """
        Parse a Markdown file with optional YAML frontmatter.

        Args:
            file_path: Path to the Markdown file (.md, .markdown)
            title: Title override; defaults to frontmatter title, then the file stem

        Returns:
            ParseResult with the document or error information
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return ParseResult(success=False, error=f"File not found: {file_path}")

        if not file_path.is_file():
            return ParseResult(success=False, error=f"Path is not a file: {file_path}")

        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return ParseResult(success=False, error=f"Unable to read file as UTF-8: {e}")

        return self.parse_content(text, title=title, default_title=file_path.stem)

    def parse_content(
        self, content_text: str, title: str = None, default_title: str = "Untitled"
    ) -> ParseResult:
        """
        Parse Markdown text with optional frontmatter.

        Args:
            content_text: Raw Markdown text
            title: Title override
            default_title: Title used when neither override nor frontmatter gives one

        Returns:
            ParseResult with the document or error information
        """
        try:
            post = frontmatter.loads(content_text)
        except Exception as e:
            # Check if it's a YAML error by looking at the error message
            if "yaml" in str(e).lower() or "parser" in str(type(e).__name__).lower():
                return ParseResult(success=False, error=f"Invalid YAML frontmatter: {e}")
            return ParseResult(success=False, error=f"Error parsing content: {e}")

        metadata = dict(post.metadata) if post.metadata else {}
        document_title = title or str(metadata.get("title") or "").strip() or default_title

        document = Document(
            title=document_title,
            content=post.content or "",
            tags=normalize_tags(metadata.get("tags")),
            metadata=metadata,
        )
        return ParseResult(success=True, document=document, has_frontmatter=bool(metadata))
