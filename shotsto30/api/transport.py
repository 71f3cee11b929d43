"""
NBA Stats Transport

Sends GET requests to stats.nba.com, either directly with browser-like
headers or through a forwarding proxy that takes the target as ``?url=``.
"""

import logging
import re
from typing import Dict, Optional
from urllib.parse import urlencode

import requests

logger = logging.getLogger(__name__)

NBA_STATS_BASE = "https://stats.nba.com/stats"
NBA_STATS_ORIGIN = "https://stats.nba.com/"

# stats.nba.com rejects requests that don't look like they come from a browser
NBA_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.nba.com/",
    "Origin": "https://www.nba.com",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
}

PROXY_HEADERS: Dict[str, str] = {"Accept": "application/json"}

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_proxy_url(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a configured proxy base URL.

    Adds an https:// scheme when none is given and strips one trailing slash.

    Returns:
        Proxy base URL, or None when nothing is configured
    """
    proxy = (raw or "").strip()
    if not proxy:
        return None
    if not _SCHEME_RE.match(proxy):
        proxy = f"https://{proxy}"
    if proxy.endswith("/"):
        proxy = proxy[:-1]
    return proxy


def build_url(url: str, params: Optional[Dict[str, object]] = None) -> str:
    """Append query parameters to a URL (empty values are kept)."""
    if not params:
        return url
    return f"{url}?{urlencode(params)}"


class StatsTransport:
    """Routes stats.nba.com requests directly or via the forwarding proxy."""

    def __init__(
        self,
        proxy_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize transport.

        Args:
            proxy_url: Proxy base URL (None = direct mode)
            timeout: Request timeout in seconds (None = no timeout)
            session: Optional requests session to reuse
        """
        self.proxy_url = normalize_proxy_url(proxy_url)
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def uses_proxy(self) -> bool:
        return self.proxy_url is not None

    def get(self, url: str, params: Optional[Dict[str, object]] = None) -> requests.Response:
        """
        Issue a GET request for a stats.nba.com URL.

        Network failures propagate as requests.RequestException.
        """
        target = build_url(url, params)

        if self.proxy_url:
            logger.info("[NBA] Using proxy: %s (request to stats.nba.com)", self.proxy_url)
            return self.session.get(
                self.proxy_url,
                params={"url": target},
                headers=PROXY_HEADERS,
                timeout=self.timeout,
            )

        logger.info("[NBA] Direct request (no proxy)")
        return self.session.get(target, headers=NBA_HEADERS, timeout=self.timeout)
