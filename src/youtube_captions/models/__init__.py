"""Data models for caption retrieval."""

from .caption import FetchedTranscript, TranscriptSnippet, TranslationLanguage
from .innertube import (
    CaptionsPayload,
    CaptionTrackData,
    PlayabilityStatus,
    PlayerResponse,
    TranslationLanguageData,
)

__all__ = [
    "FetchedTranscript",
    "TranscriptSnippet",
    "TranslationLanguage",
    # Player API schema
    "CaptionsPayload",
    "CaptionTrackData",
    "PlayabilityStatus",
    "PlayerResponse",
    "TranslationLanguageData",
]
