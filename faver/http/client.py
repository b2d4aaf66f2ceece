# faver/http/client.py
"""
HTTP client: one shared aiohttp session per run, with timeout, User-Agent and
optional (explicitly requested) disabling of TLS certificate checks.
"""
from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Any, Optional, Type

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector

from faver.config import FaverConfig
from faver.errors import FetchError
from faver.http.models import FetchedResource
from faver.logger import logger


class HttpClient:
    """Performs GET requests and buffers the full response body.

    Redirects are followed with aiohttp's defaults; the final URL is kept on
    the returned :class:`FetchedResource`. The HTTP status is never checked
    here, only transport failures are turned into :class:`FetchError`.
    """

    def __init__(self, config: FaverConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self._session = session
        self._owns_session = False

    async def __aenter__(self) -> HttpClient:
        if self._session is None:
            connector_kwargs: dict[str, Any] = {}
            if self.config.insecure_skip_verify:
                logger.warning("TLS certificate verification is disabled")
                connector_kwargs["ssl"] = False
            self._session = ClientSession(
                connector=TCPConnector(**connector_kwargs),
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError("HttpClient is not open; use 'async with HttpClient(...)'")
        return self._session

    async def get(self, url: str) -> FetchedResource:
        """GET *url* and return the buffered response, whatever its status."""
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                content = await resp.read()
                resource = FetchedResource(
                    url=url,
                    final_url=str(resp.url),
                    status=resp.status,
                    content_type=resp.headers.get("Content-Type", ""),
                    content=content,
                )
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc
        logger.debug("GET %s -> %s (%d bytes)", resource.final_url, resource.status, len(content))
        return resource
