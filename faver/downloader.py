# File: faver/downloader.py
"""faver.downloader: Загрузка байтов иконки по абсолютному URL."""

from __future__ import annotations

from faver.errors import ValidationError
from faver.http.client import HttpClient
from faver.logger import logger

__all__ = ["Downloader", "MIN_URL_LENGTH"]

# len("http://")
MIN_URL_LENGTH = 7


class Downloader:
    """Скачивает иконку целиком в память, без проверки статуса и формата."""

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def download(self, url: str) -> bytes:
        if len(url) < MIN_URL_LENGTH:
            raise ValidationError(url)
        resource = await self.client.get(url)
        if resource.status >= 400:
            logger.warning("Icon %s answered %s, keeping body as is", url, resource.status)
        return resource.content
