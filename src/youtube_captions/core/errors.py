"""
Error taxonomy for caption retrieval.

Every retrieval failure is a ``CouldNotRetrieveTranscript`` tagged with an
``ErrorKind``. Kind-specific details travel as plain attributes; turning an
error into a readable message is the job of ``core.messages``.
"""

from enum import Enum
from typing import Any, List, Optional, Sequence


class ErrorKind(Enum):
    """Closed set of reasons a transcript could not be retrieved."""
    INVALID_VIDEO_ID = "invalid_video_id"
    VIDEO_UNAVAILABLE = "video_unavailable"
    AGE_RESTRICTED = "age_restricted"
    VIDEO_UNPLAYABLE = "video_unplayable"
    REQUEST_BLOCKED = "request_blocked"
    IP_BLOCKED = "ip_blocked"
    TRANSCRIPTS_DISABLED = "transcripts_disabled"
    NO_TRANSCRIPT_FOUND = "no_transcript_found"
    NOT_TRANSLATABLE = "not_translatable"
    TRANSLATION_LANGUAGE_NOT_AVAILABLE = "translation_language_not_available"
    PO_TOKEN_REQUIRED = "po_token_required"
    FAILED_TO_CREATE_CONSENT_COOKIE = "failed_to_create_consent_cookie"
    YOUTUBE_DATA_UNPARSABLE = "youtube_data_unparsable"
    YOUTUBE_REQUEST_FAILED = "youtube_request_failed"


BLOCKED_KINDS = frozenset({ErrorKind.REQUEST_BLOCKED, ErrorKind.IP_BLOCKED})


class CouldNotRetrieveTranscript(Exception):
    """Raised for every failure on the way from a video id to caption segments."""

    def __init__(
        self,
        kind: ErrorKind,
        video_id: str,
        reason: Optional[str] = None,
        sub_reasons: Optional[Sequence[str]] = None,
        requested_language_codes: Optional[Sequence[str]] = None,
        transcript_list: Any = None,
    ):
        self.kind = kind
        self.video_id = video_id
        self.reason = reason
        self.sub_reasons: List[str] = list(sub_reasons or [])
        self.requested_language_codes: List[str] = list(requested_language_codes or [])
        self.transcript_list = transcript_list
        super().__init__(kind.value, video_id)

    @property
    def is_blocked(self) -> bool:
        """True when the platform is refusing our requests (retryable via proxies)."""
        return self.kind in BLOCKED_KINDS

    def __str__(self) -> str:
        # Import here to avoid circular imports
        from .messages import render_error_message
        return render_error_message(self)

    def __repr__(self) -> str:
        return f"CouldNotRetrieveTranscript(kind={self.kind.name}, video_id={self.video_id!r})"


class InvalidProxyConfig(ValueError):
    """Raised when a proxy configuration cannot be used."""
