# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from site_probe.logger import configure

#: depth of the nested page served at /deep (beyond the default recursion limit)
DEEP_NESTING: int = 1500
#: seconds the /slow handler sleeps
SLOW_SLEEP: float = 0.3


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def build_site() -> web.Application:
    app = web.Application()

    async def handle_root(_):
        return web.Response(
            text="<html><head><title>Test Title</title></head><body></body></html>",
            content_type="text/html",
        )

    async def handle_notitle(_):
        return web.Response(text="<html><body><h1>No title</h1></body></html>", content_type="text/html")

    async def handle_empty_title(_):
        return web.Response(text="<html><head><title></title></head></html>", content_type="text/html")

    async def handle_missing(_):
        return web.Response(
            status=404,
            text="<html><head><title>Not Found</title></head></html>",
            content_type="text/html",
        )

    async def handle_redirect(_):
        raise web.HTTPFound("/")

    async def handle_deep(_):
        body = "<div>" * DEEP_NESTING + "<title>Deep</title>" + "</div>" * DEEP_NESTING
        return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")

    async def handle_latin1(_):
        return web.Response(
            body="<title>Café</title>".encode("latin-1"),
            headers={"Content-Type": "text/html; charset=latin-1"},
        )

    async def handle_meta_latin1(_):
        # charset only in the markup, not in the Content-Type header
        return web.Response(
            body='<html><head><meta charset="iso-8859-1"><title>Café</title></head></html>'.encode("latin-1"),
            headers={"Content-Type": "text/html"},
        )

    async def handle_slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return web.Response(text="<title>Slow</title>", content_type="text/html")

    app.router.add_get("/", handle_root)
    app.router.add_get("/notitle", handle_notitle)
    app.router.add_get("/empty-title", handle_empty_title)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/redirect", handle_redirect)
    app.router.add_get("/deep", handle_deep)
    app.router.add_get("/latin1", handle_latin1)
    app.router.add_get("/meta-latin1", handle_meta_latin1)
    app.router.add_get("/slow", handle_slow)
    return app


@pytest_asyncio.fixture
async def site_url(unused_tcp_port: int) -> AsyncIterator[str]:
    """Base URL of a local test site (see build_site for the routes)."""
    async for url in serve_app(build_site(), unused_tcp_port):
        yield url


@pytest.fixture()
def refused_url(unused_tcp_port_factory) -> str:
    """URL of a local port nothing listens on."""
    return f"http://127.0.0.1:{unused_tcp_port_factory()}/"


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests bind the log handler to CliRunner's stderr; restore a live one afterwards."""
    yield
    configure(level="INFO")
