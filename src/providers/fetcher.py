"""
HTTP fetcher for provider scrapers. Wraps aiohttp with common defaults,
headers, timeout, and optional proxy support.
"""
from __future__ import annotations
import aiohttp
import asyncio
from typing import Optional

from . import config
from .base import ExtractionError

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

class Fetcher:
    def __init__(self, *, timeout: int = config.PROVIDER_TIMEOUT,
                 proxy: str | None = config.PROVIDER_PROXY):
        self.timeout = aiohttp.ClientTimeout(total=timeout, connect=4)
        self.proxy = proxy
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": DEFAULT_UA},
                connector=aiohttp.TCPConnector(ssl=False),
            )
        return self._session

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    async def get(self, url: str) -> str:
        """Fetch a page and return its body as text."""
        session = await self._get_session()
        try:
            async with session.get(
                url,
                allow_redirects=True,
                proxy=self.proxy,
            ) as resp:
                return await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ExtractionError(f"GET {url} failed: {e!r}") from e
