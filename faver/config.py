# === FILE: faver/config.py ===
"""
Модуль для загрузки и валидации конфигурации faver.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from faver import __version__


class FaverConfig(BaseModel):
    """Конфигурация одного запуска загрузки иконок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(
        f"faver/{__version__}", min_length=1, description="Заголовок User-Agent."
    )
    insecure_skip_verify: bool = Field(
        False,
        description="Принимать любой TLS-сертификат. Ослабляет защиту, только явно.",
    )
    output_dir: Path = Field(Path("."), description="Каталог для сохранения иконок.")
    fail_fast: bool = Field(
        False, description="Останавливать обработку после первой неудачной цели."
    )

    @field_validator("output_dir", mode="before")
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


DEFAULT_CONFIG = Path("faver.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> FaverConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект FaverConfig.

    Без явного пути используется ``faver.yaml`` из текущего каталога, а если
    его нет, то значения по умолчанию. Явно указанный, но отсутствующий файл
    приводит к FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG.is_file():
            return FaverConfig()
        path_obj = DEFAULT_CONFIG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return FaverConfig(**data)


__all__ = ["FaverConfig", "load_config", "DEFAULT_CONFIG"]
