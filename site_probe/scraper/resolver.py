# site_probe/scraper/resolver.py
"""
IP resolver: host of a URL -> first address returned by the system resolver.
"""
from __future__ import annotations

import asyncio
import socket
from typing import Optional

from site_probe.errors import ResolveError
from site_probe.logger import logger
from site_probe.utils import extract_host


class IPResolver:
    """Resolves URL hosts through the event loop's getaddrinfo (A and AAAA)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    async def resolve(self, url: str) -> str:
        host = extract_host(url)
        if not host:
            raise ResolveError(url, "empty host")
        loop = self._loop or asyncio.get_running_loop()
        try:
            infos = await loop.getaddrinfo(host, None, type=socket.SOCK_STREAM)
        except (OSError, UnicodeError) as exc:
            # socket.gaierror is an OSError
            raise ResolveError(url, exc) from exc
        if not infos:
            raise ResolveError(url, f"no addresses for {host}")
        address = infos[0][4][0]
        logger.debug("Resolved %s -> %s", host, address)
        return str(address)
