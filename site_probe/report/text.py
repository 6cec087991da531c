# site_probe/report/text.py
"""One-line rendering of a record, printed as soon as the record arrives."""
from site_probe.scraper.models import WebsiteRecord

LINE_FORMAT = "URL: {url}, Title: {title}, IP Address: {ip_address}"


def format_record(record: WebsiteRecord) -> str:
    return LINE_FORMAT.format(url=record.url, title=record.title, ip_address=record.ip_address)
