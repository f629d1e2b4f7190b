"""Fetching the watch page and pulling the internal API key out of it."""

import html as html_lib
import re
from typing import Optional

import requests

from ..utils.logging import get_logger
from . import http
from .config import config
from .consent import derive_consent_cookie, detects_consent_wall
from .errors import CouldNotRetrieveTranscript, ErrorKind

logger = get_logger("watch_page")

_API_KEY_RE = re.compile(r'"INNERTUBE_API_KEY":\s*"([a-zA-Z0-9_-]+)"')
CAPTCHA_MARKER = 'class="g-recaptcha"'


def extract_innertube_api_key(html: str, video_id: str) -> str:
    """
    Extract the INNERTUBE_API_KEY embedded in the watch page.

    Raises:
        CouldNotRetrieveTranscript: IP_BLOCKED when a CAPTCHA page was served,
            YOUTUBE_DATA_UNPARSABLE when the key is simply not there.
    """
    match = _API_KEY_RE.search(html)
    if match:
        return match.group(1)

    if CAPTCHA_MARKER in html:
        raise CouldNotRetrieveTranscript(ErrorKind.IP_BLOCKED, video_id)

    raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_DATA_UNPARSABLE, video_id)


class WatchPageFetcher:
    """
    Fetches watch pages, answering the consent wall once if it shows up.

    The CONSENT cookie obtained is kept for the lifetime of the instance.
    Instances are not thread-safe.
    """

    def __init__(self, session: requests.Session):
        self.session = session
        self.consent_cookie: Optional[str] = None

    def fetch_video_html(self, video_id: str) -> str:
        html = self._fetch_html(video_id)

        if detects_consent_wall(html):
            logger.warning(f"Consent wall served for {video_id}, negotiating consent cookie")
            self.consent_cookie = derive_consent_cookie(html, video_id)
            html = self._fetch_html(video_id)
            if detects_consent_wall(html):
                raise CouldNotRetrieveTranscript(ErrorKind.FAILED_TO_CREATE_CONSENT_COOKIE, video_id)

        return html

    def _fetch_html(self, video_id: str) -> str:
        url = config.innertube.watch_url.format(video_id=video_id)
        headers = {"Accept-Language": "en-US"}
        if self.consent_cookie:
            headers["Cookie"] = f"CONSENT={self.consent_cookie}"

        logger.debug(f"GET {url}")
        response = http.request(self.session, "GET", url, video_id, headers=headers)
        return html_lib.unescape(response.text)
