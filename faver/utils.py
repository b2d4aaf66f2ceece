# File: faver/utils.py
"""faver.utils: Утилитарные функции для чтения целей и работы с URL."""

from __future__ import annotations

from typing import Iterable, List, Sequence, TextIO
from urllib.parse import urlsplit

from faver.logger import logger

__all__: Sequence[str] = ("extract_host", "read_targets", "remove_duplicates")


def extract_host(url: str) -> str:
    """Возвращает host[:port] из URL без дополнительных проверок."""
    return urlsplit(url).netloc.rpartition("@")[2]


def read_targets(stream: TextIO) -> List[str]:
    """Читает цели построчно, пропуская пустые строки."""
    targets: List[str] = []
    for line in stream:
        target = line.strip()
        if not target:
            continue
        logger.debug("line %s", target)
        targets.append(target)
    logger.debug("Loaded %d targets from stream", len(targets))
    return targets


def remove_duplicates(targets: Iterable[str]) -> List[str]:
    """Удаляет дубликаты целей, сохраняя порядок."""
    items = list(targets)
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate targets", removed)
    return unique
