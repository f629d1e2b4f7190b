"""HTTP session construction and status classification."""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .config import config
from .errors import CouldNotRetrieveTranscript, ErrorKind
from .proxies import ProxyConfig


def new_session(proxy_config: Optional[ProxyConfig] = None) -> requests.Session:
    """
    Build the session shared by every request of one client instance.

    Only connection errors are retried by the transport; any HTTP status is
    handed back untouched so 429s are classified (and not re-requested) here.
    """
    s = requests.Session()
    retries = Retry(total=config.network.http_connect_retries,
                    connect=config.network.http_connect_retries,
                    read=0, status=0, backoff_factor=0.8,
                    allowed_methods=["HEAD", "GET", "POST", "OPTIONS"],
                    raise_on_status=False)
    s.mount("https://", HTTPAdapter(max_retries=retries))
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.headers.update({
        "User-Agent": config.network.user_agent,
        "Accept-Language": "en-US",
    })
    if proxy_config is not None:
        s.proxies.update(proxy_config.to_requests_dict())
    return s


def raise_http_errors(response: Any, video_id: str) -> None:
    """Raise the matching retrieval error for a non-2xx response."""
    status = response.status_code
    if status == 429:
        raise CouldNotRetrieveTranscript(ErrorKind.IP_BLOCKED, video_id)
    if 400 <= status <= 599:
        raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_REQUEST_FAILED, video_id, reason=f"HTTP {status}")


def request(session: requests.Session, method: str, url: str, video_id: str, **kwargs) -> Any:
    """
    Issue one request and classify its outcome.

    Transport failures (timeouts included) surface as YOUTUBE_REQUEST_FAILED.
    """
    kwargs.setdefault("timeout", config.network.http_timeout_total)
    try:
        response = session.request(method, url, **kwargs)
    except requests.RequestException as e:
        raise CouldNotRetrieveTranscript(ErrorKind.YOUTUBE_REQUEST_FAILED, video_id, reason=str(e)) from e

    raise_http_errors(response, video_id)
    return response
