"""Tag normalization for readings."""

import re
from typing import Iterable, List, Union

MAX_TAGS = 5
MAX_TAG_LENGTH = 20

TAG_PATTERN = re.compile(r"^[a-zA-Z0-9\s]+$")


def normalize_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize a comma-separated tag string (or list of tags).

    Tags are trimmed and lowercased; empty, overlong or non-alphanumeric
    tags are dropped and at most MAX_TAGS are kept.

    Args:
        tags: "Python, Reading" style string or an iterable of tag values

    Returns:
        List of normalized tags
    """
    if not tags:
        return []

    if isinstance(tags, str):
        candidates = tags.split(",")
    elif isinstance(tags, (list, tuple, set)):
        candidates = [str(tag) for tag in tags if tag is not None]
    else:
        candidates = [str(tags)]

    normalized = []
    for candidate in candidates:
        tag = candidate.strip().lower()
        if validate_tag(tag):
            normalized.append(tag)

    return normalized[:MAX_TAGS]


def validate_tag(tag: str) -> bool:
    """Check a single tag: 1-20 chars of ASCII letters, digits and spaces."""
    if not tag or not isinstance(tag, str):
        return False

    trimmed = tag.strip()
    if not trimmed or len(trimmed) > MAX_TAG_LENGTH:
        return False

    return bool(TAG_PATTERN.match(trimmed))
