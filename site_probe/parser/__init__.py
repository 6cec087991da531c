# File: site_probe/parser/__init__.py
"""site_probe.parser: HTML title lookup."""

from .html_parser import find_title

__all__ = ["find_title"]
