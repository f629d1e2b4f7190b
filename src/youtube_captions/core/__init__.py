"""Core modules for caption discovery and retrieval."""

from .config import config
from .errors import CouldNotRetrieveTranscript, ErrorKind, InvalidProxyConfig
from .messages import render_error_message
from .proxies import ProxyConfig, GenericProxyConfig
from .transcript import Transcript
from .transcript_list import TranscriptList
from .transcript_list_fetcher import TranscriptListFetcher
from .transcript_parser import TranscriptParser

__all__ = [
    'config',
    'CouldNotRetrieveTranscript',
    'ErrorKind',
    'InvalidProxyConfig',
    'render_error_message',
    'ProxyConfig',
    'GenericProxyConfig',
    'Transcript',
    'TranscriptList',
    'TranscriptListFetcher',
    'TranscriptParser',
]
