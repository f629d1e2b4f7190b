"""Public entry point for listing and fetching YouTube captions."""

from typing import Callable, Dict, Iterable, Optional, Sequence, Union

import requests

from .core.errors import CouldNotRetrieveTranscript
from .core.http import new_session
from .core.proxies import ProxyConfig
from .core.transcript_list import TranscriptList
from .core.transcript_list_fetcher import TranscriptListFetcher
from .models import FetchedTranscript
from .utils.logging import get_logger

logger = get_logger("api")

FetchAllCallback = Callable[[str, Union[FetchedTranscript, CouldNotRetrieveTranscript]], None]


class YouTubeTranscriptApi:
    """
    Lists and fetches caption tracks without an official API key.

    One instance keeps one HTTP session and one consent cookie; it is not
    thread-safe, so use one instance per thread.

    Args:
        http_client: Session to use instead of the default one
        proxy_config: Proxies and blocked-request retry budget
    """

    def __init__(
        self,
        http_client: Optional[requests.Session] = None,
        proxy_config: Optional[ProxyConfig] = None,
    ):
        self.http_client = http_client if http_client is not None else new_session(proxy_config)
        self.proxy_config = proxy_config
        self._fetcher = TranscriptListFetcher(self.http_client, proxy_config=proxy_config)

    def list(self, video_id: str) -> TranscriptList:
        """Return the catalog of caption tracks for ``video_id``."""
        return self._fetcher.fetch(video_id)

    def fetch(
        self,
        video_id: str,
        languages: Sequence[str] = ("en",),
        preserve_formatting: bool = False,
    ) -> FetchedTranscript:
        """
        Fetch the best matching transcript for ``video_id``.

        Args:
            video_id: The video id (not the URL)
            languages: Language codes in descending priority
            preserve_formatting: Keep inline formatting tags

        Returns:
            The parsed transcript
        """
        return (
            self.list(video_id)
            .find_transcript(languages)
            .fetch(preserve_formatting=preserve_formatting)
        )

    def fetch_all(
        self,
        video_ids: Iterable[str],
        languages: Sequence[str] = ("en",),
        preserve_formatting: bool = False,
        continue_on_error: bool = False,
        callback: Optional[FetchAllCallback] = None,
    ) -> Dict[str, FetchedTranscript]:
        """
        Fetch transcripts for several videos, one after the other.

        Args:
            video_ids: Videos to fetch
            languages: Language codes in descending priority
            preserve_formatting: Keep inline formatting tags
            continue_on_error: Skip failed videos instead of raising
            callback: Called with ``(video_id, transcript_or_error)`` for every video

        Returns:
            Mapping of video id to transcript for every video that succeeded
        """
        results: Dict[str, FetchedTranscript] = {}

        for video_id in video_ids:
            try:
                transcript = self.fetch(video_id, languages=languages, preserve_formatting=preserve_formatting)
            except CouldNotRetrieveTranscript as e:
                if not continue_on_error:
                    raise
                logger.warning(f"Skipping {video_id}: {e.kind.value}")
                if callback is not None:
                    callback(video_id, e)
                continue

            results[video_id] = transcript
            if callback is not None:
                callback(video_id, transcript)

        return results


def fetch_transcript(
    video_id: str,
    languages: Sequence[str] = ("en",),
    preserve_formatting: bool = False,
) -> FetchedTranscript:
    """Fetch a transcript with a throwaway client."""
    return YouTubeTranscriptApi().fetch(video_id, languages=languages, preserve_formatting=preserve_formatting)


def list_transcripts(video_id: str) -> TranscriptList:
    """List available transcripts with a throwaway client."""
    return YouTubeTranscriptApi().list(video_id)
