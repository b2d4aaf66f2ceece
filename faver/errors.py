# File: faver/errors.py
"""faver.errors: Исключения, которыми ядро сообщает о неудаче по одной цели."""

from __future__ import annotations

__all__ = ("FaverError", "FetchError", "ParseError", "ValidationError", "NotFoundError")


class FaverError(Exception):
    """Base class for every failure raised while processing a target."""


class FetchError(FaverError):
    """Transport-level failure on a GET (page, fallback probe or icon)."""

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"cannot fetch {url}: {reason}")


class ParseError(FaverError):
    """The response body could not be parsed as an HTML document."""

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"cannot parse HTML from {url}: {reason}")


class ValidationError(FaverError):
    """An icon URL failed the minimum-length sanity check."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f'URL "{url}" is not valid')


class NotFoundError(FaverError):
    """Discovery finished without producing a single icon candidate."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"no favicons for {target} found")
