"""Detection of the cookie-consent wall and derivation of the CONSENT cookie."""

import re

from .errors import CouldNotRetrieveTranscript, ErrorKind

CONSENT_FORM_MARKER = 'action="https://consent.youtube.com/s"'
_CONSENT_VALUE_RE = re.compile(r'name="v" value="(.*?)"')


def detects_consent_wall(html: str) -> bool:
    return CONSENT_FORM_MARKER in html


def derive_consent_cookie(html: str, video_id: str) -> str:
    """
    Build the CONSENT cookie value from the consent form.

    Raises:
        CouldNotRetrieveTranscript: FAILED_TO_CREATE_CONSENT_COOKIE if the form field is missing
    """
    match = _CONSENT_VALUE_RE.search(html)
    if match is None:
        raise CouldNotRetrieveTranscript(ErrorKind.FAILED_TO_CREATE_CONSENT_COOKIE, video_id)
    return f"YES+{match.group(1)}"
