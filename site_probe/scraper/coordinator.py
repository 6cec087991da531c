# === FILE: site_probe/scraper/coordinator.py ===
from __future__ import annotations

import asyncio
import time
from typing import AsyncIterator, Iterable, List, Optional

from aiohttp import ClientSession, ClientTimeout

from site_probe.config import ProbeConfig
from site_probe.logger import logger
from site_probe.scraper.fetcher import TitleFetcher
from site_probe.scraper.models import WebsiteRecord
from site_probe.scraper.resolver import IPResolver
from site_probe.scraper.worker import ErrorSink, ScrapeWorker

__all__ = ("Coordinator",)

_CLOSED = object()


class Coordinator:
    """
    Fans out one worker task per URL and fans their records into a single stream.

    Used as an async context manager; it owns the HTTP session unless one is
    injected.
    """

    def __init__(
        self,
        config: Optional[ProbeConfig] = None,
        *,
        session: Optional[ClientSession] = None,
        fetcher: Optional[TitleFetcher] = None,
        resolver: Optional[IPResolver] = None,
        on_error: Optional[ErrorSink] = None,
    ) -> None:
        self.config = config or ProbeConfig()
        self.session = session
        self._owns_session = session is None
        self._fetcher = fetcher
        self._resolver = resolver
        self._on_error = on_error
        self.worker: Optional[ScrapeWorker] = None

    async def __aenter__(self) -> Coordinator:
        if self.session is None:
            headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
            self.session = ClientSession(
                timeout=ClientTimeout(total=None),
                headers=headers,
                raise_for_status=False,
            )
        self.worker = ScrapeWorker(
            self._fetcher or TitleFetcher(self.session, self.config),
            self._resolver or IPResolver(),
            on_error=self._on_error,
            placeholder=self.config.placeholder,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def scrape_all(self, urls: Iterable[str]) -> AsyncIterator[WebsiteRecord]:
        """
        Yield one record per URL in completion order, then stop.

        Every URL is launched immediately. The stream closes once the last
        worker has reported; leaving the loop early cancels the rest.
        """
        if self.worker is None:
            raise RuntimeError("Coordinator not entered")
        urls = list(urls)
        if not urls:
            return

        logger.info("Scraping %d URLs", len(urls))
        start = time.monotonic()
        queue: asyncio.Queue[object] = asyncio.Queue()
        remaining = len(urls)

        def _on_done(task: asyncio.Task, url: str) -> None:
            nonlocal remaining
            if not task.cancelled() and task.exception() is not None:
                exc = task.exception()
                logger.error("Worker for %s crashed", url, exc_info=(type(exc), exc, exc.__traceback__))
                placeholder = self.config.placeholder
                queue.put_nowait(WebsiteRecord(url=url, title=placeholder, ip_address=placeholder))
            remaining -= 1
            if remaining == 0:
                queue.put_nowait(_CLOSED)

        tasks: List[asyncio.Task] = []
        for url in urls:
            task = asyncio.create_task(self._scrape_one(url, queue), name=f"scrape:{url}")
            task.add_done_callback(lambda t, u=url: _on_done(t, u))
            tasks.append(task)

        emitted = 0
        try:
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    break
                emitted += 1
                yield item  # type: ignore[misc]
        finally:
            pending = [t for t in tasks if not t.done()]
            for t in pending:
                t.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            duration = time.monotonic() - start
            logger.info("Finished: %d/%d records in %.2f s", emitted, len(urls), duration)

    async def collect(self, urls: Iterable[str]) -> List[WebsiteRecord]:
        return [record async for record in self.scrape_all(urls)]

    async def _scrape_one(self, url: str, queue: asyncio.Queue[object]) -> None:
        if self.worker is None:
            raise RuntimeError("Coordinator not entered")
        record = await self.worker.run(url)
        queue.put_nowait(record)
