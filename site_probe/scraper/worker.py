# site_probe/scraper/worker.py
"""
Scrape worker: title and IP lookups for a single URL, joined into one record.

Lookup failures never leave the worker. They become placeholder values and
are handed to a diagnostics sink.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

from site_probe.errors import ScrapeError
from site_probe.logger import logger
from site_probe.scraper.fetcher import TitleFetcher
from site_probe.scraper.models import WebsiteRecord
from site_probe.scraper.resolver import IPResolver

__all__ = ("ErrorSink", "log_scrape_error", "ScrapeWorker")

ErrorSink = Callable[[str, str, ScrapeError], None]

_STAGE_LABELS = {"title": "title", "ip": "IP address"}


def log_scrape_error(url: str, stage: str, error: ScrapeError) -> None:
    """Default diagnostics sink: one warning per failed lookup."""
    logger.warning(
        "Error fetching %s for %s: %s (%s)",
        _STAGE_LABELS.get(stage, stage),
        url,
        error,
        type(error).__name__,
    )


class ScrapeWorker:
    """Runs both lookups for a URL concurrently and always returns a record."""

    def __init__(
        self,
        fetcher: TitleFetcher,
        resolver: IPResolver,
        *,
        on_error: Optional[ErrorSink] = None,
        placeholder: str = "N/A",
    ) -> None:
        self.fetcher = fetcher
        self.resolver = resolver
        self.on_error = on_error or log_scrape_error
        self.placeholder = placeholder

    async def run(self, url: str) -> WebsiteRecord:
        title_result, ip_result = await asyncio.gather(
            self.fetcher.fetch_title(url),
            self.resolver.resolve(url),
            return_exceptions=True,
        )
        title = self._settle(url, "title", title_result)
        ip_address = self._settle(url, "ip", ip_result)
        return WebsiteRecord(url=url, title=title, ip_address=ip_address)

    def _settle(self, url: str, stage: str, result: object) -> str:
        if isinstance(result, ScrapeError):
            self.on_error(url, stage, result)
            return self.placeholder
        if isinstance(result, BaseException):
            raise result
        # a page without a <title> is not a failure
        return "" if result is None else str(result)
