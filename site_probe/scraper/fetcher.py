# site_probe/scraper/fetcher.py
"""
Title fetcher: one HTTP GET per URL, first <title> of the response body.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession
from bs4 import ParserRejectedMarkup

from site_probe.config import ProbeConfig
from site_probe.errors import FetchError, ParseError
from site_probe.logger import logger
from site_probe.parser.html_parser import find_title, parse_document


class TitleFetcher:
    """Fetches a page and extracts its title. No retries, no timeout of its own."""

    def __init__(self, session: ClientSession, config: Optional[ProbeConfig] = None) -> None:
        self.session = session
        self.config = config or ProbeConfig()

    async def fetch_title(self, url: str) -> Optional[str]:
        """
        Return the page title, or None when the page has none.

        Raises FetchError on transport failure and ParseError when the parser
        rejects the body.
        """
        body, charset = await self._fetch_body(url)
        try:
            soup = parse_document(body, from_encoding=charset)
        except ParserRejectedMarkup as exc:
            raise ParseError(url, exc) from exc
        title = find_title(soup)
        logger.debug("Title for %s: %r", url, title)
        return title

    async def _fetch_body(self, url: str) -> tuple[bytes, Optional[str]]:
        cfg = self.config
        try:
            async with self.session.get(
                url,
                allow_redirects=cfg.follow_redirects,
                max_redirects=cfg.max_redirects,
                ssl=cfg.verify_ssl,
                raise_for_status=cfg.raise_for_status,
            ) as resp:
                logger.debug("GET %s -> HTTP %s", url, resp.status)
                # whole body is drained inside the context; the connection is
                # released on exit whatever happens next
                raw = await resp.read()
                # header charset only; None lets the parser sniff <meta charset>
                charset = resp.charset
        except (ClientError, asyncio.TimeoutError, ValueError, OSError) as exc:
            raise FetchError(url, exc) from exc

        return raw, charset
