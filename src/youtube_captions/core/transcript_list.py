"""Catalog of caption tracks available for one video."""

from typing import Dict, Iterable, Iterator, List, Mapping, Sequence

import requests

from ..models import CaptionsPayload, TranslationLanguage
from .errors import CouldNotRetrieveTranscript, ErrorKind
from .transcript import Transcript

# The platform defaults to a protobuf-based format; without this parameter it serves XML
FORMAT_PARAMETER = "&fmt=srv3"


class TranscriptList:
    """
    All caption tracks of a video, split into manually created and generated.

    Iteration yields manually created tracks first, then generated ones, each in
    the order the platform returned them.
    """

    def __init__(
        self,
        video_id: str,
        manually_created_transcripts: Mapping[str, Transcript],
        generated_transcripts: Mapping[str, Transcript],
        translation_languages: Sequence[TranslationLanguage],
    ):
        self.video_id = video_id
        self._manually_created_transcripts: Dict[str, Transcript] = dict(manually_created_transcripts)
        self._generated_transcripts: Dict[str, Transcript] = dict(generated_transcripts)
        self._translation_languages: List[TranslationLanguage] = list(translation_languages)

    @staticmethod
    def build(session: requests.Session, video_id: str, captions_json: CaptionsPayload) -> "TranscriptList":
        """
        Build the catalog from the player API's caption payload.

        Args:
            session: HTTP session handed to every track
            video_id: The video id
            captions_json: Parsed ``playerCaptionsTracklistRenderer``

        Returns:
            The populated TranscriptList
        """
        translation_languages = [
            TranslationLanguage(language=entry.language, language_code=entry.language_code)
            for entry in captions_json.translation_languages
        ]

        manually_created_transcripts: Dict[str, Transcript] = {}
        generated_transcripts: Dict[str, Transcript] = {}

        for caption in captions_json.caption_tracks:
            target = generated_transcripts if caption.is_generated else manually_created_transcripts
            target[caption.language_code] = Transcript(
                session,
                video_id,
                caption.base_url.replace(FORMAT_PARAMETER, ""),
                caption.name,
                caption.language_code,
                caption.is_generated,
                translation_languages if caption.is_translatable else [],
            )

        return TranscriptList(
            video_id,
            manually_created_transcripts,
            generated_transcripts,
            translation_languages,
        )

    @property
    def translation_languages(self) -> List[TranslationLanguage]:
        return list(self._translation_languages)

    @property
    def transcripts(self) -> List[Transcript]:
        return list(self)

    def __iter__(self) -> Iterator[Transcript]:
        yield from self._manually_created_transcripts.values()
        yield from self._generated_transcripts.values()

    def __len__(self) -> int:
        return len(self._manually_created_transcripts) + len(self._generated_transcripts)

    def find_transcript(self, language_codes: Iterable[str]) -> Transcript:
        """
        Find a track for the first matching language code.

        For each code a manually created track wins over a generated one.

        Args:
            language_codes: Language codes in descending priority

        Raises:
            CouldNotRetrieveTranscript: NO_TRANSCRIPT_FOUND if nothing matches
        """
        return self._find_transcript(
            language_codes,
            [self._manually_created_transcripts, self._generated_transcripts],
        )

    def find_generated_transcript(self, language_codes: Iterable[str]) -> Transcript:
        """Like ``find_transcript`` but only considers generated tracks."""
        return self._find_transcript(language_codes, [self._generated_transcripts])

    def find_manually_created_transcript(self, language_codes: Iterable[str]) -> Transcript:
        """Like ``find_transcript`` but only considers manually created tracks."""
        return self._find_transcript(language_codes, [self._manually_created_transcripts])

    def _find_transcript(
        self,
        language_codes: Iterable[str],
        transcript_dicts: List[Dict[str, Transcript]],
    ) -> Transcript:
        language_codes = list(language_codes)
        for language_code in language_codes:
            for transcript_dict in transcript_dicts:
                if language_code in transcript_dict:
                    return transcript_dict[language_code]

        raise CouldNotRetrieveTranscript(
            ErrorKind.NO_TRANSCRIPT_FOUND,
            self.video_id,
            requested_language_codes=language_codes,
            transcript_list=self,
        )

    def __str__(self) -> str:
        return (
            f"For this video ({self.video_id}) transcripts are available in the following languages:\n\n"
            "(MANUALLY CREATED)\n"
            f"{self._get_language_description(self._manually_created_transcripts.values())}\n\n"
            "(GENERATED)\n"
            f"{self._get_language_description(self._generated_transcripts.values())}\n\n"
            "(TRANSLATION LANGUAGES)\n"
            f"{self._get_translation_description()}\n"
        )

    @staticmethod
    def _get_language_description(transcripts: Iterable[Transcript]) -> str:
        lines = [f" - {transcript}" for transcript in transcripts]
        return "\n".join(lines) if lines else "None"

    def _get_translation_description(self) -> str:
        lines = [
            f' - {translation_language.language_code} ("{translation_language.language}")'
            for translation_language in self._translation_languages
        ]
        return "\n".join(lines) if lines else "None"
