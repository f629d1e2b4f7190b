"""Pytest configuration and fixtures for the caption client tests."""

import os
import sys

import pytest

# Add the src and tests directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

# Keep test output quiet
os.environ.setdefault("LOG_LEVEL", "WARNING")

from mocks.mock_youtube import (  # noqa: E402
    CAPTION_XML,
    VIDEO_ID,
    MockYouTubeSession,
    mock_youtube,
    player_response,
    watch_page_html,
)


@pytest.fixture
def video_id():
    """The video id every fake route is registered for."""
    return VIDEO_ID


@pytest.fixture
def sample_html():
    return watch_page_html()


@pytest.fixture
def sample_player_response():
    return player_response()


@pytest.fixture
def sample_caption_xml():
    return CAPTION_XML


@pytest.fixture
def youtube_session():
    """Fake session answering the full happy path."""
    return mock_youtube()


@pytest.fixture
def empty_session():
    """Fake session with no routes; register them per test."""
    return MockYouTubeSession()
