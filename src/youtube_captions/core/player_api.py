"""Calls to the internal player endpoint, with the blocked-request retry policy."""

from typing import Any, Dict, Optional

import requests

from ..models import CaptionsPayload, PlayerResponse
from ..utils.logging import get_logger
from . import http
from .config import config
from .errors import CouldNotRetrieveTranscript, ErrorKind
from .playability import assert_playability
from .proxies import ProxyConfig
from .watch_page import WatchPageFetcher, extract_innertube_api_key

logger = get_logger("player_api")


class PlayerApiClient:
    """
    Drives watch page -> API key -> player request for one video.

    Args:
        session: HTTP session shared with the rest of the client
        proxy_config: Supplies ``retries_when_blocked``; None means no retries
        page_fetcher: Watch page fetcher (and consent state) to reuse
    """

    def __init__(
        self,
        session: requests.Session,
        proxy_config: Optional[ProxyConfig] = None,
        page_fetcher: Optional[WatchPageFetcher] = None,
    ):
        self.session = session
        self.proxy_config = proxy_config
        self.page_fetcher = page_fetcher or WatchPageFetcher(session)

    def fetch_captions_json(self, video_id: str) -> CaptionsPayload:
        """
        Return the caption catalog payload for ``video_id``.

        Blocked failures are retried until ``retries_when_blocked`` attempts
        have been made (at least one), each attempt repeating the whole
        sequence. Nothing else is retried.
        """
        retries = self.proxy_config.retries_when_blocked if self.proxy_config is not None else 0
        max_attempts = max(retries, 1)
        attempt = 0

        while True:
            try:
                return self._fetch_captions_json_once(video_id)
            except CouldNotRetrieveTranscript as e:
                attempt += 1
                if not e.is_blocked or attempt >= max_attempts:
                    raise
                logger.warning(f"Request for {video_id} blocked, attempt {attempt}/{max_attempts}")

    def _fetch_captions_json_once(self, video_id: str) -> CaptionsPayload:
        html = self.page_fetcher.fetch_video_html(video_id)
        api_key = extract_innertube_api_key(html, video_id)
        innertube_data = self.fetch_innertube_data(video_id, api_key)
        return self.extract_captions_json(innertube_data, video_id)

    def fetch_innertube_data(self, video_id: str, api_key: str) -> Dict[str, Any]:
        url = config.innertube.player_api_url.format(api_key=api_key)
        payload = {"context": config.innertube.context, "videoId": video_id}

        logger.debug(f"POST {url.split('?')[0]} for {video_id}")
        response = http.request(
            self.session, "POST", url, video_id,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        try:
            return response.json()
        except ValueError as e:
            raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_DATA_UNPARSABLE, video_id) from e

    @staticmethod
    def extract_captions_json(innertube_data: Dict[str, Any], video_id: str) -> CaptionsPayload:
        if not isinstance(innertube_data, dict):
            raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_DATA_UNPARSABLE, video_id)

        player_response = PlayerResponse.from_dict(innertube_data)
        assert_playability(player_response.playability_status, video_id)

        if player_response.captions is None:
            raise CouldNotRetrieveTranscript(ErrorKind.TRANSCRIPTS_DISABLED, video_id)

        return player_response.captions
