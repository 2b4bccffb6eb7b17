# File: sitemap_gen/pages.py
"""sitemap_gen.pages: Источник записей страниц для sitemap.

По умолчанию используется таблица из шести страниц, поставляемая вместе с
пакетом (``sitemap_gen/data/pages.yaml``). Вместо неё можно передать свой
YAML/JSON-файл со списком записей.
"""

from __future__ import annotations

from datetime import date, datetime
from importlib import resources
from pathlib import Path
from typing import Any, List, Literal, Sequence, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator

from sitemap_gen.logger import logger
from sitemap_gen.utils import parse_structured, read_structured

__all__: Sequence[str] = (
    "ChangeFreq",
    "PageRecord",
    "DEFAULT_PAGES_RESOURCE",
    "load_pages",
    "parse_pages",
    "to_records",
)

ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]

DEFAULT_PAGES_RESOURCE = "pages.yaml"


class PageRecord(BaseModel):
    """Одна запись sitemap: URL страницы и метаданные протокола sitemaps.org."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    loc: str
    lastmod: str
    priority: Union[StrictInt, StrictFloat]
    changefreq: ChangeFreq

    @field_validator("loc")
    def _check_absolute_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"loc must be an absolute http(s) URL, got {v!r}")
        return v

    @field_validator("lastmod", mode="before")
    def _date_to_string(cls, v: Any) -> Any:
        # YAML отдаёт неэкранированные даты как date/datetime
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        return v

    @field_validator("lastmod")
    def _check_lastmod(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            try:
                datetime.fromisoformat(v)
            except ValueError:
                raise ValueError(f"lastmod must be an ISO date, got {v!r}") from None
        return v

    @field_validator("priority")
    def _check_priority(cls, v: Union[int, float]) -> Union[int, float]:
        if not 0 <= v <= 1:
            raise ValueError(f"priority must be within [0, 1], got {v}")
        return v


def parse_pages(data: Any) -> List[PageRecord]:
    """Проверяет сырые данные (список mapping) и возвращает список PageRecord."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"Список страниц должен быть sequence, получено {type(data).__name__}")
    return [item if isinstance(item, PageRecord) else PageRecord(**item) for item in data]


def load_pages(path: Union[str, Path, None] = None) -> List[PageRecord]:
    """
    Читает список страниц из YAML/JSON-файла.
    Без path возвращает встроенную таблицу страниц.
    """
    if path is None:
        text = resources.files("sitemap_gen.data").joinpath(DEFAULT_PAGES_RESOURCE).read_text(encoding="utf-8")
        pages = parse_pages(parse_structured(text, ".yaml", DEFAULT_PAGES_RESOURCE))
        logger.debug("Loaded %d built-in pages", len(pages))
        return pages

    pages = parse_pages(read_structured(path))
    logger.debug("Loaded %d pages from %s", len(pages), path)
    return pages


def to_records(pages: Sequence[PageRecord]) -> List[dict[str, Any]]:
    """Превращает PageRecord в плоские dict в порядке полей loc, lastmod, priority, changefreq."""
    return [page.model_dump() for page in pages]
