"""
Модуль для загрузки и валидации конфигурации генератора sitemap.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from sitemap_gen.pages import PageRecord, load_pages
from sitemap_gen.utils import read_structured


class GeneratorConfig(BaseModel):
    """Конфигурация одного запуска генерации sitemap."""
    model_config = ConfigDict(extra="forbid")

    file_type: str = Field("xml", description="Формат файла: xml, csv или json.")
    file_path: Optional[Path] = Field(None, description="Директория для sitemap (по умолчанию app dir).")
    delimiter: str = Field(";", min_length=1, description="Разделитель столбцов CSV.")
    pages_file: Optional[Path] = Field(None, description="YAML/JSON-файл со списком страниц.")
    pages: List[PageRecord] = Field(default_factory=list, description="Записи страниц.")

    @model_validator(mode="before")
    @classmethod
    def _pages_from_source(cls, data: Any) -> Any:
        # Явный список страниц важнее файла; без обоих берётся встроенная таблица
        if isinstance(data, dict) and "pages" not in data:
            data = {**data, "pages": load_pages(data.get("pages_file"))}
        return data


def load_config(path: Union[str, Path, None] = None) -> GeneratorConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект GeneratorConfig.
    Без path возвращает конфигурацию по умолчанию. Отсутствующий файл -> FileNotFoundError.
    """
    if path is None:
        return GeneratorConfig()

    path_obj = Path(path).expanduser().resolve()
    data = read_structured(path_obj) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень конфига должен быть mapping, получено {type(data).__name__}")

    # Относительный pages_file считается от директории конфига
    pages_file = data.get("pages_file")
    if pages_file and not Path(pages_file).expanduser().is_absolute():
        data["pages_file"] = str(path_obj.parent / pages_file)

    return GeneratorConfig(**data)


__all__ = ["GeneratorConfig", "load_config"]
