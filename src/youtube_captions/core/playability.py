"""Classification of the player API's ``playabilityStatus``."""

from typing import Optional

from ..models import PlayabilityStatus
from .errors import CouldNotRetrieveTranscript, ErrorKind


class PlayabilityStatusValue:
    """Status values reported by the platform."""
    OK = "OK"
    ERROR = "ERROR"
    LOGIN_REQUIRED = "LOGIN_REQUIRED"


class PlayabilityFailedReason:
    """Reason strings the platform is known to emit."""
    BOT_DETECTED = "Sign in to confirm you're not a bot"
    AGE_RESTRICTED = "This video may be inappropriate for some users."
    VIDEO_UNAVAILABLE = "This video is unavailable"


def looks_like_url(video_id: str) -> bool:
    """Whether the caller passed a full URL where a bare video id was expected."""
    return video_id.startswith("http://") or video_id.startswith("https://")


def classify_playability(status: Optional[PlayabilityStatus], video_id: str) -> Optional[ErrorKind]:
    """
    Map a playability status onto an error kind.

    Returns:
        None when the video is playable, otherwise the matching ErrorKind.
        Anything not explicitly recognised is VIDEO_UNPLAYABLE.
    """
    if status is None:
        return None

    if status.status in (None, PlayabilityStatusValue.OK):
        return None

    if status.status == PlayabilityStatusValue.LOGIN_REQUIRED:
        if status.reason == PlayabilityFailedReason.BOT_DETECTED:
            return ErrorKind.REQUEST_BLOCKED
        if status.reason == PlayabilityFailedReason.AGE_RESTRICTED:
            return ErrorKind.AGE_RESTRICTED

    if status.status == PlayabilityStatusValue.ERROR and status.reason == PlayabilityFailedReason.VIDEO_UNAVAILABLE:
        if looks_like_url(video_id):
            return ErrorKind.INVALID_VIDEO_ID
        return ErrorKind.VIDEO_UNAVAILABLE

    return ErrorKind.VIDEO_UNPLAYABLE


def assert_playability(status: Optional[PlayabilityStatus], video_id: str) -> None:
    """Raise ``CouldNotRetrieveTranscript`` unless the video is playable."""
    kind = classify_playability(status, video_id)
    if kind is None:
        return

    if kind is ErrorKind.VIDEO_UNPLAYABLE:
        raise CouldNotRetrieveTranscript(
            kind,
            video_id,
            reason=status.reason,
            sub_reasons=status.sub_reasons,
        )

    raise CouldNotRetrieveTranscript(kind, video_id)
