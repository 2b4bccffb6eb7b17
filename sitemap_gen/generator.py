# File: sitemap_gen/generator.py
"""sitemap_gen.generator: Orchestration layer для выбора записей, сериализации и записи файла."""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import click

from sitemap_gen.config import GeneratorConfig
from sitemap_gen.errors import EncodingError, FileWriteError
from sitemap_gen.logger import logger
from sitemap_gen.pages import to_records
from sitemap_gen.serializer import SitemapFormat, serialize

__all__ = ["APP_NAME", "Generator", "default_directory", "ensure_directory", "write_atomic"]

APP_NAME = "sitemap_gen"


def default_directory() -> Path:
    """Директория по умолчанию: каталог приложения пользователя + ``sitemaps``."""
    return Path(click.get_app_dir(APP_NAME)) / "sitemaps"


def ensure_directory(directory: Union[str, Path]) -> Path:
    """Создаёт директорию со всеми родителями; повторный вызов безопасен."""
    path = Path(directory).expanduser()
    try:
        path.mkdir(mode=0o777, parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Unable to create directory %s: %s", path, exc)
        raise FileWriteError(f"Unable to create directory {path}: {exc}") from exc
    return path


def write_atomic(target: Path, content: str) -> Path:
    """Пишет content во временный файл рядом с target и атомарно переименовывает его."""
    tmp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(content)
        os.replace(tmp_name, target)
    except UnicodeError as exc:
        logger.error("Unable to encode %s as UTF-8: %s", target, exc)
        raise EncodingError(f"Sitemap content is not valid UTF-8: {exc}", code=100501) from exc
    except OSError as exc:
        logger.error("Unable to write %s: %s", target, exc)
        raise FileWriteError(f"Unable to create sitemap file {target}: {exc}") from exc
    finally:
        # после успешного os.replace временного файла уже нет
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return target


class Generator:
    """Фасад для CLI и тестов: собирает записи, сериализует их и сохраняет sitemap."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()

    @property
    def directory(self) -> Path:
        return Path(self.config.file_path).expanduser() if self.config.file_path else default_directory()

    @staticmethod
    def sitemap_filename(file_type: str, today: Optional[date] = None) -> str:
        """Имя вида ``sitemap_YYYY-MM-DD.{file_type}``, которое выводится в лог перед генерацией."""
        return f"sitemap_{(today or date.today()):%Y-%m-%d}.{file_type}"

    def records(self) -> list[dict[str, Any]]:
        return to_records(self.config.pages)

    def run(self, records: Optional[Sequence[Mapping[str, Any]]] = None) -> Path:
        """Генерирует sitemap и возвращает путь к записанному файлу.

        Файл всегда пишется как ``{directory}/sitemap.{format}``; имя с датой
        только выводится в лог.

        Raises:
            UnsupportedFormatError, EncodingError: до записи, файл не создаётся.
            FileWriteError: не удалось создать директорию или записать файл.
        """
        file_type = self.config.file_type
        data = self.records() if records is None else records

        logger.info("Getting ready to generate the file %s", self.sitemap_filename(file_type))
        logger.info("Found %d items. Start processing...", len(data))

        fmt = SitemapFormat.parse(file_type)
        content = serialize(data, fmt, self.config.delimiter)

        directory = ensure_directory(self.directory)
        target = write_atomic(directory / f"sitemap.{fmt.extension}", content)
        logger.info("File is ready by path: %s", target)
        return target
