# site_probe/errors.py
"""
Failure taxonomy for the per-URL lookups.

None of these ever escape a worker: they are turned into placeholder values
and reported to the diagnostics sink.
"""
from __future__ import annotations


class ScrapeError(Exception):
    """Base class for a failed sub-fetch of one URL."""

    stage = "scrape"

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")

    def __str__(self) -> str:
        return str(self.reason)


class FetchError(ScrapeError):
    """Transport-level failure of the HTTP GET (connection, TLS, invalid URL, status)."""

    stage = "title"


class ParseError(ScrapeError):
    """The response body could not be decoded or built into a document tree."""

    stage = "title"


class ResolveError(ScrapeError):
    """DNS resolution of the URL host failed or returned nothing."""

    stage = "ip"


__all__ = ["ScrapeError", "FetchError", "ParseError", "ResolveError"]
