# File: sitemap_gen/serializer/xml_serializer.py
"""sitemap_gen.serializer.xml_serializer: Генерация sitemap.xml с помощью lxml."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from lxml import etree

from sitemap_gen.errors import EncodingError
from sitemap_gen.logger import logger

SITEMAP_NS: Final[str] = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS: Final[str] = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION: Final[str] = f"{SITEMAP_NS} {SITEMAP_NS}/sitemap.xsd"

__all__ = ["SITEMAP_NS", "XSI_NS", "SCHEMA_LOCATION", "render_xml", "array_to_xml"]


def _qname(tag: str) -> str:
    return f"{{{SITEMAP_NS}}}{tag}"


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def array_to_xml(parent: etree._Element, data: Any, node_key: str = "item") -> None:
    """Рекурсивно добавляет data в parent.

    Ключи mapping становятся именами элементов. Элементы последовательности
    и целочисленные ключи получают имя node_key. Вложенные mapping/списки разворачиваются в
    дочерние элементы (их элементы списков называются ``item``).
    """
    if isinstance(data, Mapping):
        items = data.items()
    else:
        items = ((node_key, value) for value in data)

    for key, value in items:
        if isinstance(key, int):
            key = node_key
        try:
            node = etree.SubElement(parent, _qname(str(key)))
        except ValueError as exc:
            raise EncodingError(f"Invalid XML element name {key!r}: {exc}", code=100501) from exc
        if isinstance(value, (Mapping, list, tuple)):
            array_to_xml(node, value)
            continue
        try:
            node.text = _to_text(value)
        except ValueError as exc:
            # управляющие символы и NUL недопустимы в XML 1.0
            raise EncodingError(f"Value of {key!r} is not XML compatible: {exc}", code=100501) from exc


def render_xml(records: Sequence[Mapping[str, Any]]) -> str:
    """Сериализует records в документ ``<urlset>`` протокола sitemaps.org.

    Args:
        records: упорядоченный список плоских записей страниц.

    Returns:
        Строка XML с декларацией ``<?xml ... encoding='UTF-8'?>``.

    Raises:
        EncodingError: если lxml не смог построить или сериализовать дерево.

    Пример:
    ```python
    from sitemap_gen.serializer.xml_serializer import render_xml
    print(render_xml([{"loc": "https://site.ru/", "priority": 1}]))
    ```
    """
    root = etree.Element(_qname("urlset"), nsmap={None: SITEMAP_NS, "xsi": XSI_NS})
    root.set(f"{{{XSI_NS}}}schemaLocation", SCHEMA_LOCATION)
    array_to_xml(root, records, "url")

    try:
        raw = etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)
    except (etree.LxmlError, ValueError, TypeError) as exc:
        raise EncodingError(code=100501) from exc
    if not raw:
        raise EncodingError(code=100501)

    logger.debug("Rendered XML sitemap: %d urls, %d bytes", len(records), len(raw))
    return raw.decode("utf-8")
