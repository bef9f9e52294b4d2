"""Tests for link-safe sentence extraction."""

from sentence_deck.segmenter.sentence_extractor import (SentenceExtractor,
                                                        extract_sentences)


class TestSentenceExtractor:
    """Test the SentenceExtractor component."""

    def test_url_is_not_split(self):
        """Periods inside a bare URL do not end a sentence."""
        sentences = extract_sentences("Visit https://a.b/c.d.e for info. Thanks.")

        assert sentences == ["Visit https://a.b/c.d.e for info.", "Thanks."]

    def test_markdown_link_is_not_split(self):
        """Markdown links are restored intact."""
        extractor = SentenceExtractor()

        sentences = extractor.extract_sentences("See [the docs](https://x.io/a.b) now. Done.")

        assert sentences == ["See [the docs](https://x.io/a.b) now.", "Done."]

    def test_www_url(self):
        """www. addresses are protected too."""
        sentences = extract_sentences("Go to www.example.com today. Bye.")

        assert sentences == ["Go to www.example.com today.", "Bye."]

    def test_several_urls_in_one_sentence(self):
        """Each placeholder maps back to its own original text."""
        sentences = extract_sentences("Compare http://a.com/x.y and http://b.com/z.w here. End.")

        assert sentences == ["Compare http://a.com/x.y and http://b.com/z.w here.", "End."]

    def test_text_without_terminator(self):
        """Text without punctuation is a single sentence."""
        assert extract_sentences("No punctuation here") == ["No punctuation here"]

    def test_text_after_last_terminator_dropped(self):
        """Only terminated sentences are kept once any terminator is present."""
        assert extract_sentences("Hello world. Goodbye") == ["Hello world."]

    def test_url_followed_by_link(self):
        """A URL running into a markdown link restores both literally."""
        sentences = extract_sentences("See http://x.io[a](b) now.")

        assert sentences == ["See http://x.io[a](b) now."]

    def test_delimiter_characters_in_input(self):
        """Private-use delimiter characters in the input are left as they were."""
        text = "Odd \ue0007\ue001 text. More \ue0000\ue001 here."

        assert extract_sentences(text) == [
            "Odd \ue0007\ue001 text.",
            "More \ue0000\ue001 here.",
        ]

    def test_repeated_terminators(self):
        """Runs of terminators stay with their sentence."""
        assert extract_sentences("Really?! Yes... Fine.") == ["Really?!", "Yes...", "Fine."]

    def test_empty_text(self):
        """Blank input yields nothing."""
        assert extract_sentences("") == []
        assert extract_sentences("   ") == []
