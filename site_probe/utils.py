# File: site_probe/utils.py
"""site_probe.utils: URL normalization, host extraction and input line reading."""

from __future__ import annotations

from typing import Iterable, List, Sequence
from urllib.parse import urlsplit

from site_probe.logger import logger

__all__: Sequence[str] = (
    "SCHEMES",
    "normalize_url",
    "extract_host",
    "read_urls",
)

SCHEMES: Sequence[str] = ("http://", "https://")


def normalize_url(raw: str, *, scheme: str = "https", host_prefix: str = "www.") -> str:
    """Prepend ``scheme://`` and *host_prefix* unless *raw* already has an http(s) scheme."""
    if raw.startswith(tuple(SCHEMES)):
        return raw
    normalized = f"{scheme}://{host_prefix}{raw}"
    logger.debug("Normalized URL: %s -> %s", raw, normalized)
    return normalized


def extract_host(url: str) -> str:
    """Return the bare host of *url*.

    The authority is whatever follows the first ``//`` (or the whole string
    when there is none); path, query, fragment, userinfo and port are then
    stripped, and IPv6 brackets removed.
    """
    _, sep, rest = url.partition("//")
    authority = rest if sep else url
    for delim in "/?#":
        authority = authority.split(delim, 1)[0]
    if not authority:
        return ""
    try:
        host = urlsplit(f"//{authority}").hostname
    except ValueError:
        # unbalanced IPv6 brackets and the like; DNS will reject it
        return authority
    return host or authority


def read_urls(lines: Iterable[str], sentinel: str = "done") -> List[str]:
    """Collect raw URL tokens until the *sentinel* line or end of input.

    Surrounding whitespace is stripped and blank lines are skipped.
    """
    tokens: List[str] = []
    for line in lines:
        token = line.strip()
        if token == sentinel:
            break
        if token:
            tokens.append(token)
    logger.debug("Read %d URL tokens", len(tokens))
    return tokens
