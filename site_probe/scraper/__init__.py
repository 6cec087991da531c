# File: site_probe/scraper/__init__.py
"""site_probe.scraper: per-URL title/IP lookups and the fan-out/fan-in coordinator."""

from .coordinator import Coordinator
from .fetcher import TitleFetcher
from .models import WebsiteRecord
from .resolver import IPResolver
from .worker import ScrapeWorker, log_scrape_error

__all__ = [
    "Coordinator",
    "IPResolver",
    "ScrapeWorker",
    "TitleFetcher",
    "WebsiteRecord",
    "log_scrape_error",
]
