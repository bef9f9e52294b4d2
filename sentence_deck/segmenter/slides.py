"""Slide variants produced by the block segmenter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional


class SlideKind(str, Enum):
    """Discriminator for the slide variants."""

    PROSE = "prose"
    SUBTITLE_INTRO = "subtitle_intro"
    BULLET = "bullet"
    CODE = "code"
    BLOCKQUOTE = "blockquote"
    IMAGE = "image"
    TABLE = "table"
    CHECKBOX = "checkbox"
    FOOTNOTE_DEF = "footnote_def"
    MATH_BLOCK = "math_block"


# Flag name used in the flat reader record for each kind (prose has none)
KIND_FLAGS = {
    SlideKind.SUBTITLE_INTRO: "isSubtitleIntro",
    SlideKind.BULLET: "isBulletPoint",
    SlideKind.CODE: "isCodeBlock",
    SlideKind.BLOCKQUOTE: "isBlockquote",
    SlideKind.IMAGE: "isImage",
    SlideKind.TABLE: "isTable",
    SlideKind.CHECKBOX: "isCheckbox",
    SlideKind.FOOTNOTE_DEF: "isFootnoteDef",
    SlideKind.MATH_BLOCK: "isMathBlock",
}


@dataclass(frozen=True)
class Slide:
    """One unit of the presentation sequence."""

    kind: ClassVar[SlideKind] = SlideKind.PROSE

    id: int
    title: str
    subtitle: Optional[str]
    sentence: str

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the flat record consumed by reader front ends.

        Returns:
            Dictionary with the common fields, the kind flag and kind attributes
        """
        data = {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "sentence": self.sentence,
        }
        flag = KIND_FLAGS.get(self.kind)
        if flag:
            data[flag] = True
        data.update(self._kind_fields())
        return data

    def _kind_fields(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class ProseSlide(Slide):
    """A single sentence extracted from a paragraph."""


@dataclass(frozen=True)
class SubtitleIntroSlide(Slide):
    """Shows a section subtitle on its own before the section body."""

    kind: ClassVar[SlideKind] = SlideKind.SUBTITLE_INTRO


@dataclass(frozen=True)
class BulletSlide(Slide):
    """A bulleted, numbered or "Label: description" list item."""

    kind: ClassVar[SlideKind] = SlideKind.BULLET

    bullet_history: List[str] = field(default_factory=list)
    is_numbered_list: bool = False
    indent_level: int = 0
    parent_bullet: Optional[str] = None
    parent_is_numbered: Optional[bool] = None
    parent_number_index: Optional[int] = None

    def _kind_fields(self) -> Dict[str, Any]:
        data = {
            "bulletHistory": list(self.bullet_history),
            "isNumberedList": self.is_numbered_list,
            "indentLevel": self.indent_level,
        }
        if self.parent_bullet is not None:
            data["parentBullet"] = self.parent_bullet
            data["parentIsNumbered"] = bool(self.parent_is_numbered)
        if self.parent_number_index is not None:
            data["parentNumberIndex"] = self.parent_number_index
        return data


@dataclass(frozen=True)
class CodeSlide(Slide):
    """Contents of a fenced code block."""

    kind: ClassVar[SlideKind] = SlideKind.CODE

    code_language: str = "text"

    def _kind_fields(self) -> Dict[str, Any]:
        return {"codeLanguage": self.code_language}


@dataclass(frozen=True)
class BlockquoteSlide(Slide):
    kind: ClassVar[SlideKind] = SlideKind.BLOCKQUOTE


@dataclass(frozen=True)
class ImageSlide(Slide):
    """A standalone markdown image; sentence is the alt text or "Image"."""

    kind: ClassVar[SlideKind] = SlideKind.IMAGE

    image_url: str = ""
    image_alt: str = ""

    def _kind_fields(self) -> Dict[str, Any]:
        return {"imageUrl": self.image_url, "imageAlt": self.image_alt}


@dataclass(frozen=True)
class TableSlide(Slide):
    """A pipe table; sentence is a "Table: h1, h2" summary."""

    kind: ClassVar[SlideKind] = SlideKind.TABLE

    table_headers: List[str] = field(default_factory=list)
    table_rows: List[List[str]] = field(default_factory=list)

    def _kind_fields(self) -> Dict[str, Any]:
        return {
            "tableHeaders": list(self.table_headers),
            "tableRows": [list(row) for row in self.table_rows],
        }


@dataclass(frozen=True)
class CheckboxSlide(Slide):
    kind: ClassVar[SlideKind] = SlideKind.CHECKBOX

    is_checked: bool = False

    def _kind_fields(self) -> Dict[str, Any]:
        return {"isChecked": self.is_checked}


@dataclass(frozen=True)
class FootnoteDefSlide(Slide):
    kind: ClassVar[SlideKind] = SlideKind.FOOTNOTE_DEF

    footnote_id: str = ""
    footnote_text: str = ""

    def _kind_fields(self) -> Dict[str, Any]:
        return {"footnoteId": self.footnote_id, "footnoteText": self.footnote_text}


@dataclass(frozen=True)
class MathBlockSlide(Slide):
    kind: ClassVar[SlideKind] = SlideKind.MATH_BLOCK

    math_content: str = ""

    def _kind_fields(self) -> Dict[str, Any]:
        return {"mathContent": self.math_content}


class SlideIdCounter:
    """Hands out gapless slide ids for one document."""

    def __init__(self, start: int = 0):
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def issued(self) -> int:
        """Number of ids handed out so far."""
        return self._next
