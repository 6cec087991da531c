# File: site_probe/report/__init__.py
"""site_probe.report: record lines for the terminal plus JSON and HTML batch reports."""

from __future__ import annotations

from .html_report import render_html
from .json_report import render_json
from .text import format_record

__all__ = ["format_record", "render_json", "render_html"]
