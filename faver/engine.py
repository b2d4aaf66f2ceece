# File: faver/engine.py
"""faver.engine: Orchestration layer — discover + download для одной или многих целей."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from faver.config import FaverConfig
from faver.discoverer import Discoverer
from faver.downloader import Downloader
from faver.errors import FaverError, NotFoundError
from faver.http.client import HttpClient
from faver.logger import logger

__all__ = ["FaviconFetcher", "TargetResult", "fetch_favicons", "fetch_all"]


@dataclass(slots=True)
class TargetResult:
    """Итог обработки одной цели: либо иконки, либо ошибка."""

    target: str
    icons: List[bytes] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FaviconFetcher:
    """Фасад над Discoverer и Downloader, работающий поверх одного HttpClient."""

    def __init__(self, client: HttpClient) -> None:
        self.client = client
        self.discoverer = Discoverer(client)
        self.downloader = Downloader(client)

    async def fetch_favicons(self, target: str) -> List[bytes]:
        """Находит и скачивает все иконки цели; первая ошибка прерывает работу целиком."""
        urls = await self.discoverer.discover(target)
        if not urls:
            raise NotFoundError(target)

        icons: List[bytes] = []
        for url in urls:
            icons.append(await self.downloader.download(url))
        return icons

    async def fetch_target(self, target: str) -> TargetResult:
        """
        Как fetch_favicons, но ошибка цели возвращается в TargetResult.

        Непредвиденные исключения тоже остаются в пределах своей цели и
        пишутся в лог с трейсбеком.
        """
        try:
            icons = await self.fetch_favicons(target)
        except FaverError as exc:
            return TargetResult(target=target, error=exc)
        except Exception as exc:
            logger.exception("Unexpected failure on %s", target)
            return TargetResult(target=target, error=exc)
        return TargetResult(target=target, icons=icons)


async def fetch_favicons(target: str, config: Optional[FaverConfig] = None) -> List[bytes]:
    """Одноразовый вызов: открывает клиент, обрабатывает *target*, закрывает клиент."""
    async with HttpClient(config or FaverConfig()) as client:
        return await FaviconFetcher(client).fetch_favicons(target)


async def fetch_all(
    targets: Iterable[str],
    config: FaverConfig,
    fail_fast: Optional[bool] = None,
) -> List[TargetResult]:
    """
    Обрабатывает все цели через общий HttpClient.

    По умолчанию цели обрабатываются параллельно, ошибка одной цели не влияет
    на остальные. При ``fail_fast`` цели идут по очереди, и обработка
    останавливается после первой неудачной цели.
    """
    if fail_fast is None:
        fail_fast = config.fail_fast
    targets = list(targets)

    async with HttpClient(config) as client:
        fetcher = FaviconFetcher(client)

        if not fail_fast:
            logger.info("Fetching favicons for %d target(s) concurrently", len(targets))
            return list(await asyncio.gather(*(fetcher.fetch_target(t) for t in targets)))

        results: List[TargetResult] = []
        for target in targets:
            result = await fetcher.fetch_target(target)
            results.append(result)
            if not result.ok:
                logger.info("Stopping after failure on %s", target)
                break
        return results
