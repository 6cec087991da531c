# File: site_probe/report/html_report.py
"""site_probe.report.html_report: HTML batch report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape

from site_probe.scraper.models import WebsiteRecord

TEMPLATE_NAME = "report.html.j2"

_DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>SiteProbe report</title></head>
<body>
<h1>SiteProbe report</h1>
<p>{{ records|length }} URL(s), {{ failed }} with failed lookups</p>
<table>
  <thead><tr><th>URL</th><th>Title</th><th>IP Address</th></tr></thead>
  <tbody>
  {% for r in records %}
    <tr><td>{{ r.url }}</td><td>{{ r.title }}</td><td>{{ r.ip_address }}</td></tr>
  {% endfor %}
  </tbody>
</table>
</body>
</html>
"""


def render_html(
    records: Iterable[WebsiteRecord],
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
    *,
    placeholder: str = "N/A",
) -> Path:
    """Render the batch through ``report.html.j2`` and save it.

    Args:
        records: records of the batch.
        template_dir: directory searched first for ``report.html.j2``; the
            built-in template is used when it is None or has no such file.
        output_path: path of the resulting HTML file.
        placeholder: value counted as a failed lookup in the summary line.

    Returns:
        Path of the saved HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    loaders: list[Any] = []
    if template_dir is not None:
        loaders.append(FileSystemLoader(str(template_dir)))
    loaders.append(DictLoader({TEMPLATE_NAME: _DEFAULT_TEMPLATE}))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    rows = [record.as_dict() for record in records]
    context: dict[str, Any] = {
        "records": rows,
        "failed": sum(1 for r in rows if placeholder in (r["title"], r["ip_address"])),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
