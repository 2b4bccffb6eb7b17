# File: sitemap_gen/serializer/__init__.py
"""sitemap_gen.serializer: Преобразование набора записей страниц в xml/csv/json.

Формат выбирается по тегу :class:`SitemapFormat`; каждому тегу соответствует
ровно одна чистая функция из :data:`SERIALIZERS`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Union

from sitemap_gen.errors import EncodingError, UnsupportedFormatError
from sitemap_gen.serializer.csv_serializer import render_csv
from sitemap_gen.serializer.json_serializer import render_json
from sitemap_gen.serializer.xml_serializer import render_xml

Records = Sequence[Mapping[str, Any]]


class SitemapFormat(str, Enum):
    """Поддерживаемые форматы. Значение совпадает с расширением файла."""

    XML = "xml"
    CSV = "csv"
    JSON = "json"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, file_type: Union[str, "SitemapFormat"]) -> "SitemapFormat":
        """Возвращает формат по тегу или бросает UnsupportedFormatError."""
        if isinstance(file_type, cls):
            return file_type
        try:
            return cls(file_type)
        except ValueError:
            raise UnsupportedFormatError(str(file_type), cls.choices()) from None


SERIALIZERS: dict[SitemapFormat, Callable[..., str]] = {
    SitemapFormat.XML: lambda records, delimiter: render_xml(records),
    SitemapFormat.CSV: lambda records, delimiter: render_csv(records, delimiter),
    SitemapFormat.JSON: lambda records, delimiter: render_json(records),
}


def serialize(records: Records, file_type: Union[str, SitemapFormat], delimiter: str = ";") -> str:
    """Сериализует records в запрошенный формат.

    Raises:
        UnsupportedFormatError: формат не xml/csv/json.
        EncodingError: сериализатор не вернул пригодный результат.
    """
    fmt = SitemapFormat.parse(file_type)
    content = SERIALIZERS[fmt](records, delimiter)
    try:
        content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Serialized {fmt.value} is not valid UTF-8: {exc}", code=100501) from exc
    return content


__all__ = [
    "Records",
    "SitemapFormat",
    "SERIALIZERS",
    "serialize",
    "render_xml",
    "render_csv",
    "render_json",
]
