# === FILE: faver/parser/icon_links.py ===
"""Icon-link extraction for faver.

Documents are parsed with ``html5lib``, which builds the same tree a browser
would: a missing ``<head>`` start tag is implied and an unclosed head ends at
``<body>``.

The discoverer only cares about ``<link>`` elements inside ``<head>`` whose
``rel`` attribute marks an icon.  Both ``rel="icon"`` and the legacy
``rel="shortcut icon"`` qualify: BeautifulSoup splits ``rel`` into tokens, so
any element carrying an ``icon`` token (case-insensitive) is accepted.

Only root-relative hrefs (``/path``) are resolved, against the scheme and
host of the *final* response URL.  Everything else is dropped.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from faver.errors import ParseError
from faver.logger import logger

__all__: Sequence[str] = ("ICON_REL", "parse_document", "extract_icon_hrefs", "resolve_root_relative")

ICON_REL = "icon"


def parse_document(markup: Union[str, bytes], url: str = "") -> BeautifulSoup:
    """Parse *markup* with ``html5lib`` or raise :class:`ParseError`."""
    try:
        return BeautifulSoup(markup, "html5lib")
    except ParserRejectedMarkup as exc:
        raise ParseError(url, exc) from exc


def _is_icon_link(tag: Tag) -> bool:
    rel = tag.get("rel")
    if rel is None:
        return False
    tokens = rel.split() if isinstance(rel, str) else rel
    return any(token.lower() == ICON_REL for token in tokens)


def extract_icon_hrefs(soup: BeautifulSoup) -> list[str]:
    """Return href values of icon links in ``<head>``, in document order.

    Links without ``href`` are reported and skipped.
    """
    head = soup.head
    if head is None:
        logger.debug("Document has no <head>")
        return []

    hrefs: list[str] = []
    for tag in head.find_all("link"):
        if not isinstance(tag, Tag) or not _is_icon_link(tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            logger.warning("Icon link without href skipped: %s", tag)
            continue
        hrefs.append(href.strip())
    return hrefs


def resolve_root_relative(href: str, final_url: str) -> str | None:
    """Turn ``/path`` into ``scheme://host/path`` using *final_url*.

    Returns ``None`` for hrefs that are not root-relative.
    """
    if not href.startswith("/"):
        return None
    parts = urlsplit(final_url)
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}{href}"
