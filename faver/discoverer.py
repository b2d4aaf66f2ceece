# File: faver/discoverer.py
"""faver.discoverer: Поиск URL иконок для одной цели."""

from __future__ import annotations

from typing import List

from faver.http.client import HttpClient
from faver.logger import logger
from faver.parser.icon_links import extract_icon_hrefs, parse_document, resolve_root_relative

__all__ = ["Discoverer", "FALLBACK_PATH"]

FALLBACK_PATH = "/favicon.ico"


class Discoverer:
    """Находит абсолютные URL иконок по HTML-странице цели."""

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def discover(self, target: str) -> List[str]:
        """
        Возвращает URL иконок в порядке появления в документе.

        Корне-относительные href разрешаются по схеме и хосту итогового
        (после редиректов) URL. Если ни одного не нашлось, проверяется
        ``target + "/favicon.ico"``: при любом ответе сервера он попадает в
        результат, ошибка транспорта поднимает FetchError.
        """
        page = await self.client.get(target)
        soup = parse_document(page.content, page.final_url)

        icons: List[str] = []
        for href in extract_icon_hrefs(soup):
            absolute = resolve_root_relative(href, page.final_url)
            if absolute is None:
                logger.debug("Skipping non root-relative icon href %r on %s", href, page.final_url)
                continue
            icons.append(absolute)

        if not icons:
            fallback = target + FALLBACK_PATH
            logger.debug("No icon links on %s, probing %s", target, fallback)
            probe = await self.client.get(fallback)
            logger.debug("Fallback probe %s answered %s", fallback, probe.status)
            icons.append(fallback)

        logger.info("Discovered %d icon(s) for %s", len(icons), target)
        return icons
