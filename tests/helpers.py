# File: tests/helpers.py
"""Shared test helpers: HTML builders and an in-memory HTTP client."""
from __future__ import annotations

from collections.abc import Mapping
from typing import List, Union

from faver.errors import FetchError
from faver.http.models import FetchedResource


def html_page(head: str = "", body: str = "") -> str:
    """Build a small HTML document with the given <head> and <body> content."""
    return f"<!DOCTYPE html><html><head><title>T</title>{head}</head><body>{body}</body></html>"


def resource(
    url: str, content: bytes = b"", status: int = 200, final_url: str | None = None
) -> FetchedResource:
    return FetchedResource(
        url=url,
        final_url=final_url or url,
        status=status,
        content_type="text/html",
        content=content,
    )


class FakeClient:
    """
    In-memory stand-in for HttpClient: answers from a mapping of URL to either
    a FetchedResource or an exception, and records every requested URL.
    Unknown URLs fail like a refused connection.
    """

    def __init__(self, responses: Mapping[str, Union[FetchedResource, Exception]]) -> None:
        self.responses = dict(responses)
        self.calls: List[str] = []

    async def get(self, url: str) -> FetchedResource:
        self.calls.append(url)
        answer = self.responses.get(url)
        if answer is None:
            raise FetchError(url, "connection refused")
        if isinstance(answer, Exception):
            raise answer
        return answer
