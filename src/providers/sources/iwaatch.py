"""
iwaatch — movie-only aggregator, server-rendered HTML.

Pages scraped:
  1. /?q={keyword}  → result cards: anchor + background-image + post-title
  2. detail page    → #movie-desc (2nd h2 = synopsis), #info (time / star icons)
  3. playback page  → <source type="video/mp4" size="1080">, Arabic <track>

Every operation returns an Extraction; failures never leave this module.
"""
from __future__ import annotations
import re
import logging
from urllib.parse import quote

from .. import config
from ..base import (
    DetailRecord, Episode, Extraction, SearchResult, StreamBundle, StreamVariant,
)
from ..fetcher import Fetcher
from ..runner import SourceScraper, register_source

log = logging.getLogger("flicky.providers.iwaatch")

CARD_RE = re.compile(
    r'<div class="col-xs-12 col-sm-6 col-md-3 [^"]*">([\s\S]*?)</a>\s*</div>')
HREF_RE = re.compile(r'<a href="([^"]+)"')
IMAGE_RE = re.compile(r"background-image:\s*url\('([^']+)'\)")
TITLE_RE = re.compile(r'<div class="post-title">([^<]+)</div>')

DESC_RE = re.compile(
    r'<div id="movie-desc"[^>]*>[\s\S]*?<h2[^>]*>([^<]+)</h2>[\s\S]*?<h2[^>]*>([^<]+)</h2>')
INFO_RE = re.compile(r'<ul id="info">([\s\S]*?)</ul>')
TIME_RE = re.compile(r'glyphicon-time"></span>\s*([^<\n]+)')
RATING_RE = re.compile(r'glyphicon-star-empty"[^>]*></span>\s*([^<\n]+)')

SOURCE_RE = re.compile(r'<source\s+src="([^"]+)"[^>]*type="video/mp4"[^>]*size="(\d+)"')
TRACK_RE = re.compile(r'<track\s+src="([^"]+)"[^>]*label="Arabic"[^>]*>')

NO_DESCRIPTION = "No description"
DETAILS_FALLBACK = DetailRecord(
    description="Could not load description",
    aliases="Duration: Unknown",
    airdate="Rating: Unknown",
)


# ──────────────────────────────
#  Parsers (pure: html in, records out)
# ──────────────────────────────
def parse_search(html: str) -> list[SearchResult]:
    results = []
    for card in CARD_RE.finditer(html):
        block = card.group(1)
        href = HREF_RE.search(block)
        image = IMAGE_RE.search(block)
        title = TITLE_RE.search(block)
        if not (href and image and title):
            continue
        result = SearchResult(
            title=title.group(1).strip(),
            image=image.group(1).strip(),
            href=href.group(1).strip(),
        )
        # whitespace-only fields count as missing
        if result.title and result.image and result.href:
            results.append(result)
    return results


def parse_details(html: str) -> DetailRecord:
    desc = DESC_RE.search(html)
    info = INFO_RE.search(html)

    duration = rating = ""
    if info:
        time_m = TIME_RE.search(info.group(1))
        rate_m = RATING_RE.search(info.group(1))
        if time_m:
            duration = time_m.group(1).strip()
        if rate_m:
            rating = rate_m.group(1).strip()

    return DetailRecord(
        description=desc.group(2).strip() if desc else NO_DESCRIPTION,
        aliases=f"Duration: {duration or 'Unknown'}",
        airdate=f"Rating: {rating or 'Unknown'}",
    )


def parse_streams(html: str) -> StreamBundle:
    streams = [
        StreamVariant(title=f"{size}p", url=src)
        for src, size in SOURCE_RE.findall(html)
    ]
    track = TRACK_RE.search(html)
    return StreamBundle(streams=streams, subtitles=track.group(1) if track else "")


def search_url(keyword: str, base: str = config.IWAATCH_BASE_URL) -> str:
    # leaves A-Z a-z 0-9 - _ . ! ~ * ' ( ) unescaped
    encoded = quote(keyword, safe="!~*'()")
    return f"{base}/?q={encoded}"


# ──────────────────────────────
#  Source
# ──────────────────────────────
@register_source
class Iwaatch(SourceScraper):
    id = "iwaatch"
    name = "iwaatch"
    rank = 100
    media_types = ["movie"]

    def __init__(self, base_url: str = config.IWAATCH_BASE_URL):
        self.base_url = base_url

    async def search(self, keyword: str, fetcher: Fetcher) -> Extraction:
        try:
            url = search_url(keyword, self.base_url)
            log.info("[iwaatch] searching %s", url)
            html = await fetcher.get(url)
            results = parse_search(html)
            log.info("[iwaatch] %d results for %r", len(results), keyword)
            return Extraction.of(results)
        except Exception as e:
            log.warning("[iwaatch] Search error: %s", e)
            return Extraction([], fallback=True)

    async def fetch_details(self, url: str, fetcher: Fetcher) -> Extraction:
        try:
            log.info("[iwaatch] fetching details %s", url)
            html = await fetcher.get(url)
            return Extraction.of([parse_details(html)])
        except Exception as e:
            log.warning("[iwaatch] Details error: %s", e)
            return Extraction([DETAILS_FALLBACK.to_dict()], fallback=True)

    async def list_episodes(self, url: str, fetcher: Fetcher) -> Extraction:
        try:
            return Extraction.of([Episode(href=url)])
        except Exception as e:
            log.warning("[iwaatch] Episode error: %s", e)
            return Extraction([], fallback=True)

    async def resolve_stream(self, url: str, fetcher: Fetcher) -> Extraction:
        try:
            log.info("[iwaatch] resolving streams %s", url)
            html = await fetcher.get(url)
            bundle = parse_streams(html)
            log.info("[iwaatch] %d streams, subtitles=%s",
                     len(bundle.streams), bool(bundle.subtitles))
            return Extraction.of(bundle)
        except Exception as e:
            log.warning("[iwaatch] Stream extract error: %s", e)
            return Extraction(StreamBundle().to_dict(), fallback=True)
