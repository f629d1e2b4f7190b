"""
YouTube Captions Package

Discovers and retrieves caption tracks for YouTube videos through the
platform's internal player API, and renders them as text, JSON, SRT or WebVTT.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .api import YouTubeTranscriptApi, fetch_transcript, list_transcripts
from .core import (
    CouldNotRetrieveTranscript,
    ErrorKind,
    GenericProxyConfig,
    InvalidProxyConfig,
    ProxyConfig,
    Transcript,
    TranscriptList,
    render_error_message,
)
from .models import FetchedTranscript, TranscriptSnippet, TranslationLanguage

__all__ = [
    # Logging
    'get_logger',

    # API
    'YouTubeTranscriptApi',
    'fetch_transcript',
    'list_transcripts',

    # Catalog
    'Transcript',
    'TranscriptList',
    'FetchedTranscript',
    'TranscriptSnippet',
    'TranslationLanguage',

    # Errors
    'CouldNotRetrieveTranscript',
    'ErrorKind',
    'InvalidProxyConfig',
    'render_error_message',

    # Proxies
    'ProxyConfig',
    'GenericProxyConfig',
]

# Set up package-level logger
logger = get_logger(__name__)
