# File: tests/conftest.py
import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest

from sitemap_gen.config import GeneratorConfig


@pytest.fixture(autouse=True)
def reset_logger():
    """
    CliRunner подменяет stdout, а init_logging привязывает к нему handler.
    Снимаем handlers до и после теста, чтобы не писать в закрытый поток.
    """
    lg = logging.getLogger("SitemapGen")
    lg.handlers.clear()
    yield
    lg.handlers.clear()


@pytest.fixture()
def sample_records() -> List[Dict[str, Any]]:
    """
    Return the six-page table shipped with the package as plain dicts.
    """
    return [
        {"loc": "https://site.ru/", "lastmod": "2020-12-14", "priority": 1, "changefreq": "hourly"},
        {"loc": "https://site.ru/news", "lastmod": "2020-12-10", "priority": 0.5, "changefreq": "daily"},
        {"loc": "https://site.ru/about", "lastmod": "2020-12-12", "priority": 0.5, "changefreq": "daily"},
        {"loc": "https://site.ru/products/ps5", "lastmod": "2020-12-11", "priority": 0.1, "changefreq": "weekly"},
        {"loc": "https://site.ru/products/xbox", "lastmod": "2020-12-12", "priority": 0.1, "changefreq": "weekly"},
        {"loc": "https://site.ru/products/wii", "lastmod": "2020-12-11", "priority": 0.1, "changefreq": "weekly"},
    ]


@pytest.fixture()
def out_dir(tmp_path) -> Path:
    """
    Nested output directory that does not exist yet.
    """
    return tmp_path / "public" / "sitemaps"


@pytest.fixture()
def make_config(out_dir):
    """
    Factory for GeneratorConfig writing into out_dir.
    """

    def _make(file_type: str = "xml", **kwargs: Any) -> GeneratorConfig:
        kwargs.setdefault("file_path", out_dir)
        return GeneratorConfig(file_type=file_type, **kwargs)

    return _make
