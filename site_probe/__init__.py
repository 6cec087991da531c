# site_probe/__init__.py
"""
SiteProbe package initializer.
Defines package version and exposes the batch engine; the CLI lives in site_probe.cli.
"""
__version__ = "0.1.0"

from site_probe.engine import Engine, start_scrape
from site_probe.scraper.models import WebsiteRecord

__all__ = ["__version__", "Engine", "start_scrape", "WebsiteRecord"]
