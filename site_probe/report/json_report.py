# site_probe/report/json_report.py

"""
JSON report for SiteProbe.

Serializes the records of a finished batch into a file.
"""
import json
from pathlib import Path
from typing import Iterable

from site_probe.scraper.models import WebsiteRecord


def render_json(records: Iterable[WebsiteRecord], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *records* as a JSON array of ``{"url", "title", "ip_address"}`` objects.

    :param records: records of the batch, in arrival order
    :param output_path: path of the JSON file
    :param pretty: indent the output by 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from site_probe.report.json_report import render_json
    report_path = render_json(records, 'reports/batch.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [record.as_dict() for record in records]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
