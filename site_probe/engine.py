# File: site_probe/engine.py
"""site_probe.engine: orchestration layer tying normalization, the coordinator and its consumers together."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Callable, Iterable, List, Optional

from site_probe.config import ProbeConfig, load_config
from site_probe.logger import logger
from site_probe.scraper.coordinator import Coordinator
from site_probe.scraper.models import WebsiteRecord
from site_probe.scraper.worker import ErrorSink
from site_probe.utils import normalize_url

__all__ = ["Engine", "normalize_all", "start_scrape"]


def normalize_all(tokens: Iterable[str], config: ProbeConfig) -> List[str]:
    """Normalize raw input tokens with the scheme and host prefix from *config*."""
    return [
        normalize_url(token, scheme=config.default_scheme, host_prefix=config.host_prefix)
        for token in tokens
    ]


async def start_scrape(
    cfg: ProbeConfig, tokens: Iterable[str], on_error: Optional[ErrorSink] = None
) -> AsyncIterator[WebsiteRecord]:
    """
    Normalize *tokens* and yield a record for each as soon as it is ready.

    Parameters
    ----------
    cfg : ProbeConfig
        Batch configuration.
    tokens : Iterable[str]
        Raw URL tokens, with or without a scheme.
    on_error : ErrorSink, optional
        Diagnostics sink for failed lookups; defaults to the project logger.
    """
    urls = normalize_all(tokens, cfg)
    async with Coordinator(cfg, on_error=on_error) as coordinator:
        async for record in coordinator.scrape_all(urls):
            yield record


class Engine:
    """Synchronous facade for scripts and tests: runs a whole batch and returns its records."""

    @staticmethod
    def load_config(path: Optional[str]) -> ProbeConfig:
        return load_config(path)

    def __init__(self, config: Optional[ProbeConfig] = None) -> None:
        self.config = config or ProbeConfig()

    def run(
        self,
        tokens: Iterable[str],
        on_record: Optional[Callable[[WebsiteRecord], None]] = None,
    ) -> List[WebsiteRecord]:
        """Scrape every token; *on_record* is called as each record arrives."""

        async def _runner() -> List[WebsiteRecord]:
            records: List[WebsiteRecord] = []
            async for record in start_scrape(self.config, tokens):
                if on_record is not None:
                    on_record(record)
                records.append(record)
            return records

        try:
            return asyncio.run(_runner())
        except Exception as exc:
            logger.error("Batch failed: %s", exc)
            raise
