# sitemap_gen/serializer/json_serializer.py

"""
Генерация JSON-варианта sitemap.

Массив объектов с отступом 4 пробела, порядок ключей и записей сохраняется.
"""
import json
from collections.abc import Mapping, Sequence
from typing import Any

from sitemap_gen.errors import EncodingError


def render_json(records: Sequence[Mapping[str, Any]]) -> str:
    """
    Сериализует records в JSON-массив.

    :param records: упорядоченный список записей страниц
    :return: строка JSON
    :raises EncodingError: если данные не сериализуются в JSON
    """
    try:
        content = json.dumps([dict(record) for record in records], ensure_ascii=False, indent=4)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Unable to encode records as JSON: {exc}", code=100502) from exc

    if not content:
        raise EncodingError(code=100502)
    return content
