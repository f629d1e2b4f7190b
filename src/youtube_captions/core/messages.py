"""Human-readable rendering of ``CouldNotRetrieveTranscript`` errors."""

from typing import Dict

from .errors import CouldNotRetrieveTranscript, ErrorKind

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

_BLOCKED_BASE = (
    "YouTube is blocking requests from your IP. This usually is due to one of the following reasons:\n"
    "- You have done too many requests and your IP has been blocked by YouTube\n"
    "- You are doing requests from an IP belonging to a cloud provider (like AWS, Google Cloud Platform, "
    "Azure, etc.). Unfortunately, most IPs from cloud providers are blocked by YouTube.\n\n"
)

CAUSE_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_VIDEO_ID: (
        "You provided an invalid video id. Make sure you are using the video id and NOT the url!\n\n"
        'Do NOT run: `fetch_transcript("https://www.youtube.com/watch?v=1234")`\n'
        'Instead run: `fetch_transcript("1234")`'
    ),
    ErrorKind.VIDEO_UNAVAILABLE: "The video is no longer available",
    ErrorKind.AGE_RESTRICTED: (
        "This video is age-restricted. Therefore, you are unable to retrieve transcripts for it "
        "without authenticating yourself.\n\n"
        "Unfortunately, Cookie Authentication is not supported by this client."
    ),
    ErrorKind.VIDEO_UNPLAYABLE: "The video is unplayable for the following reason: {reason}",
    ErrorKind.REQUEST_BLOCKED: _BLOCKED_BASE + (
        "There are two things you can do to work around this:\n"
        "1. Use proxies to hide your IP address.\n"
        "2. (NOT RECOMMENDED) If you authenticate your requests using cookies, you will be able to "
        "continue doing requests for a while. However, YouTube will eventually permanently ban the "
        "account that you have used to authenticate with! So only do this if you don't mind your "
        "account being banned!"
    ),
    ErrorKind.IP_BLOCKED: _BLOCKED_BASE + "Ways to work around this are using proxies or rotating residential IPs.",
    ErrorKind.TRANSCRIPTS_DISABLED: "Subtitles are disabled for this video",
    ErrorKind.NO_TRANSCRIPT_FOUND: (
        "No transcripts were found for any of the requested language codes: {codes}\n\n{transcript_list}"
    ),
    ErrorKind.NOT_TRANSLATABLE: "The requested language is not translatable",
    ErrorKind.TRANSLATION_LANGUAGE_NOT_AVAILABLE: "The requested translation language is not available",
    ErrorKind.PO_TOKEN_REQUIRED: (
        "The requested video cannot be retrieved without a PO Token. "
        "If this happens, please open an issue!"
    ),
    ErrorKind.FAILED_TO_CREATE_CONSENT_COOKIE: "Failed to automatically give consent to saving cookies",
    ErrorKind.YOUTUBE_DATA_UNPARSABLE: (
        "The data required to fetch the transcript is not parsable. This should not happen, "
        "please open an issue (make sure to include the video ID)!"
    ),
    ErrorKind.YOUTUBE_REQUEST_FAILED: "Request to YouTube failed: {reason}",
}

ISSUE_REFERRAL = (
    "\n\nIf you are sure that the described cause is not responsible for this error and that a "
    "transcript should be retrievable, please open an issue and provide the information needed "
    "to replicate the error."
)


def cause_message(error: CouldNotRetrieveTranscript) -> str:
    """Return the kind-specific explanation for ``error``."""
    template = CAUSE_MESSAGES[error.kind]

    if error.kind is ErrorKind.VIDEO_UNPLAYABLE:
        reason = error.reason or "No reason specified!"
        if error.sub_reasons:
            details = "\n".join(f" - {sub_reason}" for sub_reason in error.sub_reasons)
            reason = f"{reason}\n\nAdditional Details:\n{details}"
        return template.format(reason=reason)

    if error.kind is ErrorKind.YOUTUBE_REQUEST_FAILED:
        return template.format(reason=error.reason or "unknown")

    if error.kind is ErrorKind.NO_TRANSCRIPT_FOUND:
        return template.format(
            codes=repr(error.requested_language_codes),
            transcript_list=str(error.transcript_list) if error.transcript_list is not None else "",
        )

    return template


def render_error_message(error: CouldNotRetrieveTranscript) -> str:
    """Build the full multi-line message shown to users for ``error``."""
    video_url = WATCH_URL.format(video_id=error.video_id)
    message = f"\nCould not retrieve a transcript for the video {video_url}!"

    cause = cause_message(error)
    if cause:
        message += f" This is most likely caused by:\n\n{cause}{ISSUE_REFERRAL}"

    return message
