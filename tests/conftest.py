import pytest

from src.providers.base import ExtractionError


class FakeFetcher:
    """Serves canned HTML by URL; unknown URLs fail like a dead host."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.requested = []
        self.closed = False

    async def get(self, url, **kwargs):
        self.requested.append(url)
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            raise ExtractionError(f"GET {url} failed: connection refused")
        return page

    async def close(self):
        self.closed = True


@pytest.fixture
def fetcher():
    return FakeFetcher()
