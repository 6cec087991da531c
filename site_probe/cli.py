#!/usr/bin/env python3
# === FILE: site_probe/cli.py ===
"""
Command line entry point for SiteProbe.

Commands:
  scrape    Look up title and IP address for each URL, printing as results arrive
  config    Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/site_probe.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to this file
  --log-format FORMAT Logging format string

scrape options:
  URL...              URLs to scrape; otherwise read from --input or stdin
  --input PATH        File with one URL per line ('-' for stdin)
  --json PATH         Save a JSON report
  --html PATH         Save an HTML report
  --template DIR      Directory with a report.html.j2 template
  --pretty            Indent the JSON report

Misc:
  --version, -v       Show SiteProbe version

Example:
  site-probe scrape example.com https://python.org --json batch.json
"""
import asyncio
import sys
from pathlib import Path
from typing import List

import click

from site_probe import __version__
from site_probe.config import load_config
from site_probe.engine import start_scrape
from site_probe.logger import DEFAULT_FORMAT, init_logging
from site_probe.report import format_record, render_html, render_json
from site_probe.scraper.models import WebsiteRecord
from site_probe.utils import read_urls

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

PROMPT = "Enter URLs (one per line), type '{sentinel}' when finished:"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteProbe, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write logs to this file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteProbe: concurrent page title and IP address lookup."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


def _collect_tokens(urls, input_file, sentinel: str) -> List[str]:
    if urls:
        return list(urls)
    if input_file is None:
        stdin = click.get_text_stream('stdin')
        if stdin.isatty():
            click.echo(PROMPT.format(sentinel=sentinel), err=True)
        return read_urls(stdin, sentinel)
    return read_urls(input_file, sentinel)


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.argument('urls', nargs=-1)
@click.option(
    '--input', '-i', 'input_file',
    default=None,
    type=click.File('r', encoding='utf-8'),
    help="File with one URL per line ('-' for stdin)"
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with a report.html.j2 Jinja2 template'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent the JSON report (2 spaces)'
)
@click.pass_context
def scrape(ctx, urls, input_file, json_output, html_output, template_dir, pretty):
    """Scrape title and IP address of every URL concurrently."""
    cfg = ctx.obj['config']
    tokens = _collect_tokens(urls, input_file, cfg.sentinel)
    if not tokens:
        click.echo('No URLs given.', err=True)
        return

    async def _consume() -> List[WebsiteRecord]:
        records: List[WebsiteRecord] = []
        async for record in start_scrape(cfg, tokens):
            click.echo(format_record(record))
            records.append(record)
        return records

    try:
        records = asyncio.run(_consume())
    except Exception as e:
        print_error(f'Scraping failed: {e}')

    if json_output:
        try:
            saved_json = render_json(records, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(records, template_dir, html_output, placeholder=cfg.placeholder)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
