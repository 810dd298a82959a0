"""
Page fetcher with a proxy fallback.

Pipeline position: Stage 1 (Fetcher -> DocumentParser -> Extractor -> Analyzer).
Input:  absolute URL
Output: FetchResult with the page's raw markup

Two transports are tried in order:
  1. direct GET of the page
  2. GET through a pass-through proxy that wraps the markup in a JSON
     envelope ({"contents": "<html>..."}), for hosts that refuse direct
     scraping

There are no retries beyond this two-path fallback.
"""

import time
from typing import Optional

import requests

from .config import ScraperSettings
from .exceptions import FetchFailure
from .logger import get_module_logger
from .schemas import FetchResult

logger = get_module_logger("fetcher")


def create_session(user_agent: str) -> requests.Session:
    """Create a requests session with browser-like headers."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    })
    return session


class Fetcher:
    """Retrieves raw page markup, falling back to the proxy transport."""

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or ScraperSettings()
        # Injectable so tests can hand in a fake session
        self.session = session or create_session(self.settings.user_agent)

    def fetch(self, url: str) -> FetchResult:
        """
        Fetch the markup of ``url``.

        Raises:
            FetchFailure: both transports failed or returned empty content
        """
        errors = {}

        started = time.perf_counter()
        try:
            html = self._fetch_direct(url)
            logger.info(f"Fetched {url} directly ({len(html)} chars)")
            return FetchResult(html=html, url=url, via="direct",
                               elapsed_ms=self._elapsed_ms(started))
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Direct fetch failed for {url}: {e}; trying proxy")
            errors["direct_error"] = str(e)

        started = time.perf_counter()
        try:
            html = self._fetch_via_proxy(url)
            logger.info(f"Fetched {url} via proxy ({len(html)} chars)")
            return FetchResult(html=html, url=url, via="proxy",
                               elapsed_ms=self._elapsed_ms(started))
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Proxy fetch failed for {url}: {e}")
            errors["proxy_error"] = str(e)

        raise FetchFailure(
            f"Could not retrieve page content ({errors['proxy_error']})",
            url=url,
            details=errors
        )

    def _fetch_direct(self, url: str) -> str:
        response = self.session.get(url, timeout=self.settings.timeout)
        response.raise_for_status()
        return self._require_content(response.text, "direct response")

    def _fetch_via_proxy(self, url: str) -> str:
        response = self.session.get(
            self.settings.proxy_url,
            params={"url": url},
            timeout=self.settings.timeout
        )
        response.raise_for_status()

        # requests raises a ValueError subclass on a non-JSON body
        envelope = response.json()
        if not isinstance(envelope, dict):
            raise ValueError("proxy returned an unexpected payload")
        return self._require_content(envelope.get("contents"), "proxy response")

    @staticmethod
    def _require_content(html: object, source: str) -> str:
        if html is not None and not isinstance(html, str):
            raise ValueError(f"{source} content is {type(html).__name__}, not markup")
        if not html or not html.strip():
            raise ValueError(f"empty {source}")
        return html

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)


def fetch(url: str, settings: Optional[ScraperSettings] = None) -> FetchResult:
    """Convenience function to fetch a single page."""
    return Fetcher(settings=settings).fetch(url)
