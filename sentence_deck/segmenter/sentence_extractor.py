"""Sentence extraction that keeps links and URLs in one piece."""

import re
from typing import List

# Placeholder delimiters from the Unicode private use area
PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"


class SentenceExtractor:
    """Splits paragraph text into sentences without breaking inside links or URLs."""

    def __init__(self):
        self.delimiter_pattern = re.compile(f"[{PLACEHOLDER_OPEN}{PLACEHOLDER_CLOSE}]")
        self.link_pattern = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
        self.url_pattern = re.compile(r"(https?://\S+|www\.\S+)")
        self.sentence_pattern = re.compile(r"[^.!?]+[.!?]+")
        self.placeholder_pattern = re.compile(
            f"{PLACEHOLDER_OPEN}(\\d+){PLACEHOLDER_CLOSE}"
        )

    def extract_sentences(self, paragraph_text: str) -> List[str]:
        """
        Split paragraph text into sentences.

        Markdown links and bare URLs are swapped for placeholders before
        splitting and restored afterwards, so periods inside them never end
        a sentence. Text after the last terminator is dropped unless the
        paragraph has no terminator at all, in which case the whole text is
        one sentence.

        Args:
            paragraph_text: Joined paragraph lines

        Returns:
            Non-empty trimmed sentences in order
        """
        protected = []

        def protect(match: re.Match) -> str:
            # Stored text is already resolved, so one restore pass is enough
            protected.append(self._restore(match.group(0), protected))
            return f"{PLACEHOLDER_OPEN}{len(protected) - 1}{PLACEHOLDER_CLOSE}"

        # Delimiter characters already in the input become placeholders first,
        # so every placeholder left in the text belongs to this call
        text = self.delimiter_pattern.sub(protect, paragraph_text.strip())
        text = self.link_pattern.sub(protect, text)
        text = self.url_pattern.sub(protect, text)

        pieces = self.sentence_pattern.findall(text) or [text]

        sentences = []
        for piece in pieces:
            restored = self._restore(piece, protected).strip()
            if restored:
                sentences.append(restored)

        return sentences

    def _restore(self, text: str, protected: List[str]) -> str:
        return self.placeholder_pattern.sub(lambda m: protected[int(m.group(1))], text)


def extract_sentences(paragraph_text: str) -> List[str]:
    """Module-level shortcut for SentenceExtractor().extract_sentences."""
    return SentenceExtractor().extract_sentences(paragraph_text)
