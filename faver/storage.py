# faver/storage.py

"""
Сохранение скачанных иконок на диск.

Имя файла: ``YYYYMMDDhhmmss-<host>-<index>.ico``, где host берётся из
исходной цели (вместе с портом), а index — позиция иконки в списке.
Существующие файлы не перезаписываются: при совпадении имени к нему
добавляется счётчик, ``...-0_1.ico``, ``...-0_2.ico`` и т. д.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from faver.logger import logger
from faver.utils import extract_host

ICON_SUFFIX = ".ico"


def icon_filename(target: str, index: int, now: Optional[datetime] = None) -> str:
    """
    Строит имя файла для иконки номер *index* цели *target*.

    Пример:
    ```python
    icon_filename("https://example.com", 0, datetime(2024, 1, 2, 3, 4, 5))
    # '20240102030405-example.com-0.ico'
    ```
    """
    stamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    return f"{stamp}-{extract_host(target)}-{index}{ICON_SUFFIX}"


def _write_new(path: Path, data: bytes) -> Path:
    """Пишет data в path или, если он занят, в первое свободное имя со счётчиком."""
    candidate = path
    attempt = 0
    while True:
        try:
            with candidate.open("xb") as f:
                f.write(data)
            return candidate
        except FileExistsError:
            logger.debug("%s exists, adding a counter", candidate)
            attempt += 1
            candidate = path.with_name(f"{path.stem}_{attempt}{path.suffix}")


def save_icons(
    target: str,
    icons: Sequence[bytes],
    output_dir: Path | str = ".",
    now: Optional[datetime] = None,
) -> List[Path]:
    """
    Записывает icons в output_dir и возвращает пути созданных файлов.

    :param target: исходная цель, из неё берётся host для имени файла
    :param icons: байты иконок в порядке обнаружения
    :param output_dir: каталог назначения (создаётся при необходимости)
    :param now: момент времени для метки в имени (по умолчанию текущий)
    """
    output = Path(output_dir)
    output.mkdir(parents=True, exist_ok=True)

    # Одна метка времени на все иконки цели
    now = now or datetime.now()
    saved: List[Path] = []
    for index, icon in enumerate(icons):
        path = _write_new(output / icon_filename(target, index, now), icon)
        logger.debug("Saved %d bytes to %s", len(icon), path)
        saved.append(path)
    return saved
