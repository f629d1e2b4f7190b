"""Discovery pipeline: from a video id to its TranscriptList."""

from typing import Optional

import requests

from ..utils.logging import get_logger
from .player_api import PlayerApiClient
from .proxies import ProxyConfig
from .transcript_list import TranscriptList

logger = get_logger("transcript_list_fetcher")


class TranscriptListFetcher:
    """
    Runs watch page -> API key -> player API -> playability -> catalog.

    Every call re-runs the full sequence; nothing is cached between calls except
    the consent cookie, which lives as long as this instance.
    """

    def __init__(self, session: requests.Session, proxy_config: Optional[ProxyConfig] = None):
        self._session = session
        self._player_api = PlayerApiClient(session, proxy_config=proxy_config)

    @property
    def consent_cookie(self) -> Optional[str]:
        return self._player_api.page_fetcher.consent_cookie

    def fetch(self, video_id: str) -> TranscriptList:
        captions_json = self._player_api.fetch_captions_json(video_id)
        transcript_list = TranscriptList.build(self._session, video_id, captions_json)
        logger.info(f"Found {len(transcript_list)} caption tracks for {video_id}")
        return transcript_list
