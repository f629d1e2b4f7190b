"""Proxy configuration and the blocked-request retry budget."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from .errors import InvalidProxyConfig


class ProxyConfig(ABC):
    """Base class for proxy setups handed to the HTTP transport."""

    @abstractmethod
    def to_requests_dict(self) -> Dict[str, str]:
        """Return the mapping passed to ``requests`` as ``proxies``."""

    @property
    def retries_when_blocked(self) -> int:
        """Maximum number of attempts when the platform blocks a request (0 behaves like 1)."""
        return 0


class GenericProxyConfig(ProxyConfig):
    """
    Route requests through plain HTTP/HTTPS proxies.

    If only one URL is given it is used for both schemes.
    """

    def __init__(
        self,
        http_url: Optional[str] = None,
        https_url: Optional[str] = None,
        retries_when_blocked: int = 0,
    ):
        if not http_url and not https_url:
            raise InvalidProxyConfig(
                "GenericProxyConfig requires you to define at least one of the two: http_url or https_url"
            )
        if retries_when_blocked < 0:
            raise InvalidProxyConfig("retries_when_blocked must not be negative")

        self.http_url = http_url
        self.https_url = https_url
        self._retries_when_blocked = retries_when_blocked

    def to_requests_dict(self) -> Dict[str, str]:
        return {
            "http": self.http_url or self.https_url,
            "https": self.https_url or self.http_url,
        }

    @property
    def retries_when_blocked(self) -> int:
        return self._retries_when_blocked

    def __repr__(self) -> str:
        return (
            f"GenericProxyConfig(http_url={self.http_url!r}, https_url={self.https_url!r}, "
            f"retries_when_blocked={self._retries_when_blocked})"
        )
