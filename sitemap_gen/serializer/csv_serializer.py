# File: sitemap_gen/serializer/csv_serializer.py
"""sitemap_gen.serializer.csv_serializer: Выгрузка записей в текстовую таблицу с разделителем.

Значения не экранируются и не заключаются в кавычки: значение, содержащее
разделитель, сломает столбцы. Это известное ограничение формата выгрузки.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Any

from sitemap_gen.errors import EncodingError
from sitemap_gen.logger import logger

__all__ = ["render_csv"]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def render_csv(records: Sequence[Mapping[str, Any]], delimiter: str = ";") -> str:
    """Сериализует records: заголовок из ключей первой записи, затем строка на запись.

    Каждая строка (включая пустой заголовок для пустого набора) завершается os.linesep.
    """
    if not delimiter:
        raise EncodingError("CSV delimiter must be a non-empty string", code=100504)

    titles = list(records[0].keys()) if records else []
    lines = [delimiter.join(titles)]

    for index, record in enumerate(records):
        if list(record.keys()) != titles:
            raise EncodingError(
                f"Record #{index} keys {list(record.keys())} do not match header {titles}",
                code=100504,
            )
        lines.append(delimiter.join(_cell(record[key]) for key in titles))

    logger.debug("Rendered CSV sitemap: %d rows, delimiter %r", len(records), delimiter)
    return "".join(line + os.linesep for line in lines)
