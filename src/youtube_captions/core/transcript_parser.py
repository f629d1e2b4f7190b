"""Parsing of the legacy XML caption format into transcript snippets."""

import html
import re
import xml.etree.ElementTree as ET
from typing import List

from ..models import TranscriptSnippet

# Inline formatting tags kept when preserve_formatting is enabled
FORMATTING_TAGS = (
    "strong",
    "em",
    "b",
    "i",
    "mark",
    "small",
    "del",
    "ins",
    "sub",
    "sup",
)


class TranscriptParser:
    """Turns a raw caption XML document into an ordered list of snippets."""

    def __init__(self, preserve_formatting: bool = False):
        self.preserve_formatting = preserve_formatting
        self._html_regex = self._build_html_regex(preserve_formatting)

    @staticmethod
    def _build_html_regex(preserve_formatting: bool) -> "re.Pattern[str]":
        if preserve_formatting:
            formats = "|".join(FORMATTING_TAGS)
            return re.compile(rf"</?(?!/?(?:{formats})\b)[^>]*>", re.IGNORECASE)
        return re.compile(r"<[^>]*>", re.IGNORECASE)

    def parse(self, raw_data: str) -> List[TranscriptSnippet]:
        """
        Parse caption XML.

        Args:
            raw_data: The XML body returned by the caption URL

        Returns:
            Snippets in document order. Elements without any text are skipped.

        Raises:
            xml.etree.ElementTree.ParseError: If the payload is not XML
        """
        root = ET.fromstring(raw_data)
        snippets = []

        for element in root.iter("text"):
            text_content = "".join(element.itertext())
            if not text_content:
                continue

            snippets.append(TranscriptSnippet(
                text=self._process_text(text_content),
                start=float(element.get("start", 0.0)),
                duration=float(element.get("dur", 0.0)),
            ))

        return snippets

    def _process_text(self, text: str) -> str:
        # Unescape first: entity-encoded tags are stripped like literal ones
        return self._html_regex.sub("", html.unescape(text))
