"""A single discoverable caption track."""

import xml.etree.ElementTree as ET
from typing import Dict, Sequence

import requests

from ..models import FetchedTranscript, TranslationLanguage
from ..utils.logging import get_logger
from . import http
from .errors import CouldNotRetrieveTranscript, ErrorKind
from .transcript_parser import TranscriptParser

logger = get_logger("transcript")

# Present in caption URLs the platform will only serve with a PO token
PO_TOKEN_MARKER = "&exp=xpe"


class Transcript:
    """
    Metadata of one caption track, able to fetch its payload or derive a translation.

    Args:
        session: HTTP session used to download the caption XML
        video_id: The video the track belongs to
        url: Caption URL as published by the platform (format parameter already stripped)
        language: Display name of the language
        language_code: Language code, e.g. "en"
        is_generated: True for automatic speech recognition tracks
        translation_languages: Targets this track can be translated into (empty if not translatable);
            kept as given, so every track of one catalog shares the same list
    """

    def __init__(
        self,
        session: requests.Session,
        video_id: str,
        url: str,
        language: str,
        language_code: str,
        is_generated: bool,
        translation_languages: Sequence[TranslationLanguage],
    ):
        self._session = session
        self.video_id = video_id
        self._url = url
        self.language = language
        self.language_code = language_code
        self.is_generated = is_generated
        self.translation_languages: Sequence[TranslationLanguage] = translation_languages
        self._translation_languages_dict: Dict[str, str] = {
            translation_language.language_code: translation_language.language
            for translation_language in self.translation_languages
        }

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_translatable(self) -> bool:
        return len(self.translation_languages) > 0

    def fetch(self, preserve_formatting: bool = False) -> FetchedTranscript:
        """
        Download and parse this track.

        Args:
            preserve_formatting: Keep inline formatting tags such as <b> and <i>

        Returns:
            The parsed transcript

        Raises:
            CouldNotRetrieveTranscript: PO_TOKEN_REQUIRED (no request is made),
                IP_BLOCKED, YOUTUBE_REQUEST_FAILED or YOUTUBE_DATA_UNPARSABLE
        """
        if PO_TOKEN_MARKER in self._url:
            raise CouldNotRetrieveTranscript(ErrorKind.PO_TOKEN_REQUIRED, self.video_id)

        logger.debug(f"Fetching {self.language_code} captions for {self.video_id}")
        response = http.request(self._session, "GET", self._url, self.video_id)

        try:
            snippets = TranscriptParser(preserve_formatting=preserve_formatting).parse(response.text)
        except ET.ParseError as e:
            raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_DATA_UNPARSABLE, self.video_id) from e

        logger.info(f"Fetched {len(snippets)} snippets ({self.language_code}) for {self.video_id}")
        return FetchedTranscript(
            video_id=self.video_id,
            language=self.language,
            language_code=self.language_code,
            is_generated=self.is_generated,
            snippets=snippets,
        )

    def translate(self, language_code: str) -> "Transcript":
        """
        Return the machine-translated variant of this track.

        The result is always marked generated and is not translatable itself.
        """
        if not self.is_translatable:
            raise CouldNotRetrieveTranscript(ErrorKind.NOT_TRANSLATABLE, self.video_id)

        if language_code not in self._translation_languages_dict:
            raise CouldNotRetrieveTranscript(ErrorKind.TRANSLATION_LANGUAGE_NOT_AVAILABLE, self.video_id)

        return Transcript(
            self._session,
            self.video_id,
            f"{self._url}&tlang={language_code}",
            self._translation_languages_dict[language_code],
            language_code,
            True,
            [],
        )

    def __str__(self) -> str:
        translation_description = "[TRANSLATABLE]" if self.is_translatable else ""
        return f'{self.language_code} ("{self.language}"){translation_description}'

    def __repr__(self) -> str:
        return (
            f"Transcript(video_id={self.video_id!r}, language_code={self.language_code!r}, "
            f"is_generated={self.is_generated})"
        )
