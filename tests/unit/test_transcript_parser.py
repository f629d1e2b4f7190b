"""Unit tests for the caption XML parser."""

import xml.etree.ElementTree as ET

import pytest

from youtube_captions.core.transcript_parser import FORMATTING_TAGS, TranscriptParser
from youtube_captions.models import TranscriptSnippet


def _xml(*texts, start="0", dur="1.0"):
    body = "".join(f'<text start="{start}" dur="{dur}">{text}</text>' for text in texts)
    return f'<?xml version="1.0" encoding="utf-8" ?><transcript>{body}</transcript>'


class TestTranscriptParser:
    """Tests for TranscriptParser.parse."""

    def test_parse_sample_document(self, sample_caption_xml):
        """Empty elements are dropped, the rest keep document order."""
        # Act
        snippets = TranscriptParser().parse(sample_caption_xml)

        # Assert
        assert snippets == [
            TranscriptSnippet(text="Hey, this is just a test", start=0.0, duration=1.54),
            TranscriptSnippet(text="this is not the original transcript", start=1.54, duration=4.16),
            TranscriptSnippet(text="just something shorter, I made up for testing", start=8.939, duration=0.0),
        ]

    def test_missing_duration_defaults_to_zero(self):
        raw = '<transcript><text start="3.5">no duration</text></transcript>'

        snippets = TranscriptParser().parse(raw)

        assert snippets[0].start == 3.5
        assert snippets[0].duration == 0.0

    def test_missing_start_defaults_to_zero(self):
        raw = '<transcript><text dur="2">no start</text></transcript>'

        snippets = TranscriptParser().parse(raw)

        assert snippets[0].start == 0.0
        assert snippets[0].duration == 2.0

    def test_whitespace_only_text_is_kept(self):
        """Only elements with no text at all are skipped."""
        snippets = TranscriptParser().parse(_xml(" ", ""))

        assert [snippet.text for snippet in snippets] == [" "]

    def test_entities_are_unescaped(self):
        snippets = TranscriptParser().parse(_xml("Tom &amp;amp; Jerry &amp;#39;s"))

        assert snippets[0].text == "Tom & Jerry 's"

    def test_no_elements_yields_empty_list(self):
        assert TranscriptParser().parse("<transcript></transcript>") == []

    def test_malformed_xml_raises_parse_error(self):
        with pytest.raises(ET.ParseError):
            TranscriptParser().parse("this is not xml <")


class TestFormattingTags:
    """Tests for tag stripping with and without preserve_formatting."""

    def test_all_tags_removed_by_default(self):
        raw = _xml("&lt;b&gt;bold&lt;/b&gt; and &lt;span style='x'&gt;span&lt;/span&gt; &lt;font color=\"red\"&gt;red&lt;/font&gt;")

        snippets = TranscriptParser().parse(raw)

        assert snippets[0].text == "bold and span red"
        assert "<" not in snippets[0].text

    @pytest.mark.parametrize("tag", FORMATTING_TAGS)
    def test_formatting_tag_preserved(self, tag):
        """Every allowlisted inline tag survives when formatting is preserved."""
        # Arrange
        raw = _xml(f"&lt;{tag}&gt;word&lt;/{tag}&gt;")

        # Act
        snippets = TranscriptParser(preserve_formatting=True).parse(raw)

        # Assert
        assert snippets[0].text == f"<{tag}>word</{tag}>"

    @pytest.mark.parametrize("tag", FORMATTING_TAGS)
    def test_formatting_tag_stripped_without_preserve(self, tag):
        raw = _xml(f"&lt;{tag}&gt;word&lt;/{tag}&gt;")

        snippets = TranscriptParser(preserve_formatting=False).parse(raw)

        assert snippets[0].text == "word"

    def test_other_tags_stripped_when_preserving(self):
        # Arrange
        raw = _xml("&lt;span&gt;&lt;i&gt;kept&lt;/i&gt;&lt;/span&gt; &lt;br/&gt;&lt;bold&gt;gone&lt;/bold&gt;")

        # Act
        snippets = TranscriptParser(preserve_formatting=True).parse(raw)

        # Assert
        assert snippets[0].text == "<i>kept</i> gone"

    def test_literal_child_elements_are_flattened(self):
        """Markup delivered as real XML children contributes its text."""
        raw = '<transcript><text start="0" dur="1">a <font color="red">b</font> c</text></transcript>'

        snippets = TranscriptParser().parse(raw)

        assert snippets[0].text == "a b c"
