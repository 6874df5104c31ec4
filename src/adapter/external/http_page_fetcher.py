"""HTTP page fetcher adapter.

Implements PageFetcherPort with httpx. Dictionary sites serve different
markup to unknown clients, so requests carry a desktop browser User-Agent.
"""

import logging
import os

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from port.page_fetcher import PageFetchError

logger = logging.getLogger(__name__)

PAGE_FETCH_TIMEOUT_SECONDS = float(os.getenv("PAGE_FETCH_TIMEOUT_SECONDS", "5"))

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class HttpxPageFetcher:
    """Adapter that downloads dictionary pages and sound files over HTTP."""

    def __init__(self, timeout: float = PAGE_FETCH_TIMEOUT_SECONDS):
        self.timeout = timeout

    async def fetch_text(self, url: str, encoding: str = "utf-8") -> str | None:
        """Download a page and decode it.

        Returns:
            Page text, or None if the page does not exist (404).

        Raises:
            PageFetchError: On any other error status or transport failure.
        """
        content = await self.fetch_bytes(url)
        if content is None:
            return None
        return content.decode(encoding, errors="replace")

    async def fetch_bytes(self, url: str) -> bytes | None:
        """Download raw bytes; None on 404, PageFetchError otherwise."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            ) as client:
                response = await _fetch_with_retry(client, url)
        except httpx.RequestError as e:
            logger.warning("Request to upstream failed", extra={
                "url": url, "error_type": type(e).__name__,
            })
            raise PageFetchError(f"Cannot download '{url}': {type(e).__name__}", url=url) from e

        if response.status_code == 404:
            logger.debug("Upstream returned 404", extra={"url": url})
            return None

        if response.is_error:
            logger.warning("Upstream returned error status", extra={
                "url": url, "status_code": response.status_code,
            })
            raise PageFetchError(
                f"Server error {response.status_code} while downloading '{url}'",
                url=url,
                status_code=response.status_code,
            )

        logger.debug("Downloaded from upstream", extra={
            "url": url, "size": len(response.content),
        })
        return response.content


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url)
