# File: sitemap_gen/utils.py
"""sitemap_gen.utils: Чтение YAML/JSON-файлов для конфига и списка страниц."""

from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml

__all__ = ["YAML_SUFFIXES", "parse_structured", "read_structured"]

YAML_SUFFIXES = (".yaml", ".yml")


def parse_structured(text: str, suffix: str, source: str) -> Any:
    """Разбирает text как YAML или JSON по суффиксу; ошибки синтаксиса -> ValueError."""
    suffix = suffix.lower()
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Неправильный YAML в {source}: {exc}") from exc
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Неправильный JSON в {source}: {exc}") from exc
    raise ValueError(f"Неподдерживаемый формат файла {source}: {suffix}")


def read_structured(path: Union[str, Path]) -> Any:
    """Читает YAML/JSON-файл. Отсутствующий файл -> FileNotFoundError."""
    p = Path(path).expanduser()
    if not p.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(p))
    return parse_structured(p.read_text(encoding="utf-8"), p.suffix, str(p))
