# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict, List

import pytest
import pytest_asyncio
from aiohttp import web

from faver.config import FaverConfig
from faver.http.client import HttpClient
from faver.logger import init_logging

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI rebinds log handlers to CliRunner streams; restore defaults afterwards."""
    yield
    init_logging()


@pytest.fixture()
def config() -> FaverConfig:
    return FaverConfig(timeout=5.0, user_agent="TestAgent/1.0")


@pytest_asyncio.fixture
async def client(config: FaverConfig) -> AsyncIterator[HttpClient]:
    async with HttpClient(config) as http:
        yield http


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[Dict[str, Handler]], Awaitable[str]]]:
    """
    Factory fixture: start an aiohttp app with the given GET routes on a free
    port and return its base URL (without trailing slash). Every started app
    is cleaned up after the test.
    """
    runners: List[web.AppRunner] = []

    async def _start(routes: Dict[str, Handler]) -> str:
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        return f"http://127.0.0.1:{port}"

    try:
        yield _start
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def closed_url(unused_tcp_port_factory) -> str:
    """URL of a port nothing listens on: every request fails at transport level."""
    return f"http://127.0.0.1:{unused_tcp_port_factory()}"
