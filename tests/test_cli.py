# File: tests/test_cli.py
"""Tests for the CLI using click.testing.CliRunner.
Cover `scrape`, `config`, `--version` and error handling; the batch itself is stubbed.
"""
import importlib
import json

import pytest
from click.testing import CliRunner

from site_probe.cli import cli
from site_probe.scraper.models import WebsiteRecord

# the module object, whatever the package namespace binds to the name "cli"
cli_module = importlib.import_module("site_probe.cli")


@pytest.fixture(autouse=True)
def patch_start_scrape(monkeypatch):
    """Replace start_scrape with a stub that records its input and yields fixed records."""
    calls = []

    async def fake_scrape(cfg, tokens):
        calls.append(list(tokens))
        for token in tokens:
            yield WebsiteRecord(url=f"https://www.{token}", title=f"Title of {token}", ip_address="192.0.2.1")

    monkeypatch.setattr(cli_module, "start_scrape", fake_scrape)
    return calls


def test_cli_submodule_is_not_shadowed():
    import site_probe

    assert site_probe.cli is cli_module
    assert hasattr(site_probe.cli, "start_scrape")


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteProbe" in result.output


def test_scrape_arguments(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape", "example.com", "python.org"])
    assert result.exit_code == 0
    assert patch_start_scrape == [["example.com", "python.org"]]
    lines = result.stdout.splitlines()
    assert lines == [
        "URL: https://www.example.com, Title: Title of example.com, IP Address: 192.0.2.1",
        "URL: https://www.python.org, Title: Title of python.org, IP Address: 192.0.2.1",
    ]


def test_scrape_reads_stdin_until_sentinel(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape"], input="a.com\nb.com\ndone\nc.com\n")
    assert result.exit_code == 0
    assert patch_start_scrape == [["a.com", "b.com"]]
    assert len(result.stdout.splitlines()) == 2


def test_scrape_custom_sentinel_from_config(tmp_path, patch_start_scrape):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("sentinel: END\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "scrape"], input="a.com\ndone\nEND\nb.com\n")
    assert result.exit_code == 0
    assert patch_start_scrape == [["a.com", "done"]]


def test_scrape_input_file(tmp_path, patch_start_scrape):
    urls = tmp_path / "urls.txt"
    urls.write_text("one.com\n\ntwo.com\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape", "--input", str(urls)])
    assert result.exit_code == 0
    assert patch_start_scrape == [["one.com", "two.com"]]


def test_scrape_without_urls(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape"], input="done\n")
    assert result.exit_code == 0
    assert patch_start_scrape == []
    assert result.stdout == ""


def test_scrape_json_report(tmp_path):
    out = tmp_path / "out" / "batch.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape", "example.com", "--json", str(out), "--pretty"])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == [
        {"url": "https://www.example.com", "title": "Title of example.com", "ip_address": "192.0.2.1"}
    ]


def test_scrape_html_report(tmp_path):
    out = tmp_path / "report.html"
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape", "example.com", "--html", str(out)])
    assert result.exit_code == 0
    assert "Title of example.com" in out.read_text(encoding="utf-8")


def test_scrape_failure_exits_nonzero(monkeypatch):
    async def broken(cfg, tokens):
        raise RuntimeError("event loop exploded")
        yield  # pragma: no cover

    monkeypatch.setattr(cli_module, "start_scrape", broken)
    runner = CliRunner()
    result = runner.invoke(cli, ["scrape", "example.com"])
    assert result.exit_code == 1
    assert "Scraping failed" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"placeholder": "-", "user_agent": "Probe/1.0"}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["placeholder"] == "-"
    assert data["user_agent"] == "Probe/1.0"
    assert data["sentinel"] == "done"


def test_invalid_config_exits(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("bogus: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output
