"""
Partial schema of the player API response.

Only the fields the caption pipeline reads are modelled. Every field is
optional because the platform omits them freely; each ``from_dict`` documents
what absence means.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _runs_text(data: Optional[Dict[str, Any]]) -> str:
    """Read ``runs[0].text``, falling back to ``simpleText``."""
    if not data:
        return ""
    runs = data.get("runs") or []
    if runs and isinstance(runs[0], dict) and runs[0].get("text") is not None:
        return runs[0]["text"]
    return data.get("simpleText") or ""


@dataclass
class PlayabilityStatus:
    """``playabilityStatus``; an absent object means the video is playable."""
    status: Optional[str] = None
    reason: Optional[str] = None
    sub_reasons: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["PlayabilityStatus"]:
        if data is None:
            return None

        runs = (
            ((data.get("errorScreen") or {})
             .get("playerErrorMessageRenderer") or {})
            .get("subreason") or {}
        ).get("runs") or []

        return cls(
            status=data.get("status"),
            reason=data.get("reason"),
            sub_reasons=[run.get("text") or "" for run in runs],
        )


@dataclass
class CaptionTrackData:
    """One entry of ``captionTracks``."""
    base_url: str
    name: str
    language_code: str
    kind: str = ""
    is_translatable: bool = False

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptionTrackData":
        return cls(
            base_url=str(data.get("baseUrl") or ""),
            name=_runs_text(data.get("name")),
            language_code=data.get("languageCode") or "",
            kind=data.get("kind") or "",
            is_translatable=bool(data.get("isTranslatable", False)),
        )


@dataclass
class TranslationLanguageData:
    """One entry of ``translationLanguages``."""
    language: str
    language_code: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslationLanguageData":
        return cls(
            language=_runs_text(data.get("languageName")),
            language_code=data.get("languageCode") or "",
        )


@dataclass
class CaptionsPayload:
    """``captions.playerCaptionsTracklistRenderer``."""
    caption_tracks: List[CaptionTrackData] = field(default_factory=list)
    translation_languages: List[TranslationLanguageData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptionsPayload":
        return cls(
            caption_tracks=[CaptionTrackData.from_dict(track) for track in data.get("captionTracks") or []],
            translation_languages=[
                TranslationLanguageData.from_dict(language)
                for language in data.get("translationLanguages") or []
            ],
        )


@dataclass
class PlayerResponse:
    """The slice of the player API response used to discover captions."""
    playability_status: Optional[PlayabilityStatus] = None
    # None when the renderer is missing or carries no ``captionTracks`` key
    captions: Optional[CaptionsPayload] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerResponse":
        renderer = (data.get("captions") or {}).get("playerCaptionsTracklistRenderer")
        captions = None
        if isinstance(renderer, dict) and "captionTracks" in renderer:
            captions = CaptionsPayload.from_dict(renderer)

        return cls(
            playability_status=PlayabilityStatus.from_dict(data.get("playabilityStatus")),
            captions=captions,
        )
