# File: tests/test_engine.py
from __future__ import annotations

import pytest
from aiohttp import web

from faver.engine import FaviconFetcher, fetch_all, fetch_favicons
from faver.errors import FetchError, NotFoundError
from helpers import FakeClient, html_page, resource


@pytest.fixture()
def icon_site(serve):
    """Start a site whose head references two icons; returns a coroutine yielding its URL."""

    async def a_ico(_):
        return web.Response(body=b"icon-a", content_type="image/x-icon")

    async def b_png(_):
        return web.Response(body=b"icon-b", content_type="image/png")

    async def root(_):
        head = '<link rel="icon" href="/a.ico"><link rel="shortcut icon" href="/b.png">'
        return web.Response(text=html_page(head), content_type="text/html")

    return lambda: serve({"/": root, "/a.ico": a_ico, "/b.png": b_png})


@pytest.mark.asyncio()
async def test_fetch_favicons_downloads_in_order(icon_site, client):
    base = await icon_site()

    icons = await FaviconFetcher(client).fetch_favicons(base)

    assert icons == [b"icon-a", b"icon-b"]


@pytest.mark.asyncio()
async def test_fetch_favicons_is_repeatable(icon_site, client):
    base = await icon_site()
    fetcher = FaviconFetcher(client)

    assert await fetcher.fetch_favicons(base) == await fetcher.fetch_favicons(base)


@pytest.mark.asyncio()
async def test_second_download_failure_returns_no_partial_result():
    target = "http://example.com"
    head = '<link rel="icon" href="/a.ico"><link rel="icon" href="/b.ico">'
    fake = FakeClient(
        {
            target: resource(target, html_page(head).encode()),
            f"{target}/a.ico": resource(f"{target}/a.ico", b"icon-a"),
            f"{target}/b.ico": FetchError(f"{target}/b.ico", "connection reset"),
        }
    )
    fetcher = FaviconFetcher(fake)

    with pytest.raises(FetchError):
        await fetcher.fetch_favicons(target)

    result = await fetcher.fetch_target(target)
    assert not result.ok
    assert result.icons == []
    assert isinstance(result.error, FetchError)


@pytest.mark.asyncio()
async def test_empty_discovery_is_not_found(monkeypatch):
    fetcher = FaviconFetcher(FakeClient({}))

    async def nothing(target):
        return []

    monkeypatch.setattr(fetcher.discoverer, "discover", nothing)

    with pytest.raises(NotFoundError) as info:
        await fetcher.fetch_favicons("http://example.com")

    assert info.value.target == "http://example.com"


@pytest.mark.asyncio()
async def test_module_level_fetch_favicons(icon_site, config):
    base = await icon_site()

    assert await fetch_favicons(base, config) == [b"icon-a", b"icon-b"]


@pytest.mark.asyncio()
async def test_fetch_all_isolates_failures(icon_site, config, closed_url):
    base = await icon_site()

    results = await fetch_all([closed_url, base], config)

    assert [r.target for r in results] == [closed_url, base]
    assert isinstance(results[0].error, FetchError)
    assert results[0].icons == []
    assert results[1].ok
    assert results[1].icons == [b"icon-a", b"icon-b"]


@pytest.mark.asyncio()
async def test_fetch_all_fail_fast_stops_after_first_failure(icon_site, config, closed_url):
    base = await icon_site()

    results = await fetch_all([closed_url, base], config, fail_fast=True)

    assert len(results) == 1
    assert not results[0].ok


@pytest.mark.asyncio()
async def test_fetch_all_fail_fast_taken_from_config(icon_site, config, closed_url):
    base = await icon_site()
    strict = config.model_copy(update={"fail_fast": True})

    results = await fetch_all([base, closed_url, base], strict)

    assert [r.ok for r in results] == [True, False]


@pytest.mark.asyncio()
async def test_fetch_all_isolates_unexpected_exceptions(monkeypatch, config):
    async def flaky(self, target):
        if "broken" in target:
            raise RuntimeError("tree builder exploded")
        return [target.encode()]

    monkeypatch.setattr(FaviconFetcher, "fetch_favicons", flaky)

    results = await fetch_all(["http://ok.example", "http://broken.example", "http://also.example"], config)

    assert [r.ok for r in results] == [True, False, True]
    assert isinstance(results[1].error, RuntimeError)
    assert results[2].icons == [b"http://also.example"]


@pytest.mark.asyncio()
async def test_fail_fast_stops_on_unexpected_exception(monkeypatch, config):
    async def broken(self, target):
        raise RuntimeError("tree builder exploded")

    monkeypatch.setattr(FaviconFetcher, "fetch_favicons", broken)

    results = await fetch_all(["http://a.example", "http://b.example"], config, fail_fast=True)

    assert len(results) == 1
    assert isinstance(results[0].error, RuntimeError)
