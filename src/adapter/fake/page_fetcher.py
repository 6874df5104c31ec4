"""In-memory implementation of PageFetcherPort for testing."""

from port.page_fetcher import PageFetchError


class FakePageFetcher:
    """Fake fetcher serving preconfigured pages; unknown URLs behave like a 404."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        files: dict[str, bytes] | None = None,
        failing_urls: set[str] | None = None,
    ):
        self.pages = pages or {}
        self.files = files or {}
        self.failing_urls = failing_urls or set()
        self.requested_urls: list[str] = []

    async def fetch_text(self, url: str, encoding: str = "utf-8") -> str | None:
        self.requested_urls.append(url)
        if url in self.failing_urls:
            raise PageFetchError(f"Server error 500 while downloading '{url}'", url=url, status_code=500)
        return self.pages.get(url)

    async def fetch_bytes(self, url: str) -> bytes | None:
        self.requested_urls.append(url)
        if url in self.failing_urls:
            raise PageFetchError(f"Server error 500 while downloading '{url}'", url=url, status_code=500)
        if url in self.files:
            return self.files[url]
        page = self.pages.get(url)
        return page.encode("utf-8") if page is not None else None
