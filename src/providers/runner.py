"""
Provider engine — holds the shared fetcher and dispatches the four
catalogue operations to a registered source scraper.

Usage:
    engine = ProviderEngine()
    result = await engine.search("iwaatch", "matrix")
    print(result.to_json())
    await engine.close()
"""
from __future__ import annotations
import logging
from typing import Optional

from .base import Extraction
from .fetcher import Fetcher

log = logging.getLogger("flicky.providers")


# ──────────────────────────────
#  Scraper registry
# ──────────────────────────────
class SourceScraper:
    """Base class for registered sources: the four catalogue operations."""

    id: str
    name: str
    rank: int
    media_types: list[str]          # ["movie"] or ["movie", "tv"]

    async def search(self, keyword: str, fetcher: Fetcher) -> Extraction:
        raise NotImplementedError

    async def fetch_details(self, url: str, fetcher: Fetcher) -> Extraction:
        raise NotImplementedError

    async def list_episodes(self, url: str, fetcher: Fetcher) -> Extraction:
        raise NotImplementedError

    async def resolve_stream(self, url: str, fetcher: Fetcher) -> Extraction:
        raise NotImplementedError


class UnknownSourceError(KeyError):
    """No enabled source is registered under the requested id."""


# Global registry — populated when source modules are imported
_SOURCES: list[SourceScraper] = []


def register_source(scraper):
    """Decorator to register a source scraper class."""
    # Deduplicate: remove any existing entry with same id
    global _SOURCES
    _SOURCES = [s for s in _SOURCES if s.id != scraper.id]
    inst = scraper()
    if not getattr(inst, 'disabled', False):
        _SOURCES.append(inst)
        _SOURCES.sort(key=lambda s: s.rank, reverse=True)
    return scraper


# ──────────────────────────────
#  Engine
# ──────────────────────────────
class ProviderEngine:
    def __init__(self, *, fetcher: Optional[Fetcher] = None, timeout: Optional[int] = None):
        if fetcher is None:
            fetcher = Fetcher() if timeout is None else Fetcher(timeout=timeout)
        self.fetcher = fetcher

    async def close(self):
        await self.fetcher.close()

    def list_sources(self):
        return [{'id': s.id, 'name': s.name, 'rank': s.rank, 'disabled': False}
                for s in _SOURCES if not getattr(s, 'disabled', False)]

    def get_source(self, source_id: str) -> SourceScraper:
        for source in _SOURCES:
            if source.id == source_id:
                return source
        raise UnknownSourceError(source_id)

    async def search(self, source_id: str, keyword: str) -> Extraction:
        return await self._run(source_id, "search", keyword)

    async def fetch_details(self, source_id: str, url: str) -> Extraction:
        return await self._run(source_id, "fetch_details", url)

    async def list_episodes(self, source_id: str, url: str) -> Extraction:
        return await self._run(source_id, "list_episodes", url)

    async def resolve_stream(self, source_id: str, url: str) -> Extraction:
        return await self._run(source_id, "resolve_stream", url)

    async def _run(self, source_id: str, operation: str, arg: str) -> Extraction:
        source = self.get_source(source_id)
        log.info(f"[{source.id}] {operation}({arg!r})")
        result = await getattr(source, operation)(arg, self.fetcher)
        if result.fallback:
            log.warning(f"[{source.id}] {operation} returned fallback payload")
        return result


# ──────────────────────────────
#  Import all scrapers to register them
# ──────────────────────────────
def _load_scrapers():
    from .sources import iwaatch        # noqa: F401  rank 100 — movies only

_load_scrapers()
