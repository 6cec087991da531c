# site_probe/scraper/models.py
"""
Data models for the SiteProbe scraper.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(slots=True, frozen=True)
class WebsiteRecord:
    """Title and IP address collected for one normalized URL."""

    url: str
    title: str
    ip_address: str

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)
