"""Page fetcher port — outbound interface for downloading dictionary pages and files."""

from typing import Protocol


class PageFetchError(Exception):
    """Upstream returned a non-404 error or could not be reached."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class PageFetcherPort(Protocol):
    """Port for downloading pages and binary files.

    Both methods return None when the resource does not exist (HTTP 404)
    and raise PageFetchError for any other failure.
    """

    async def fetch_text(self, url: str, encoding: str = "utf-8") -> str | None: ...

    async def fetch_bytes(self, url: str) -> bytes | None: ...
