# File: sitemap_gen/errors.py
"""sitemap_gen.errors: Иерархия исключений генератора sitemap."""

from __future__ import annotations

__all__ = [
    "SitemapError",
    "UnsupportedFormatError",
    "EncodingError",
    "FileWriteError",
]


class SitemapError(Exception):
    """Базовое исключение генератора. ``code``: числовой код ошибки для оператора."""

    default_message = "Unexpected error occurred."
    default_code = 100500

    def __init__(self, message: str | None = None, code: int | None = None) -> None:
        self.message = message or self.default_message
        self.code = self.default_code if code is None else code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (code {self.code})"


class UnsupportedFormatError(SitemapError):
    """Запрошенный формат не входит в xml/csv/json."""

    default_message = "Unsupported sitemap file type."
    default_code = 100500

    def __init__(self, file_type: str, supported: tuple[str, ...] = ()) -> None:
        self.file_type = file_type
        message = f"Unsupported sitemap file type: {file_type!r}"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message)


class EncodingError(SitemapError):
    """Сериализатор не смог получить пригодный результат."""

    default_message = "Unexpected error occurred. Check your file type and try again."
    default_code = 100501


class FileWriteError(SitemapError):
    """Не удалось создать директорию или записать файл."""

    default_message = "Unable to create sitemap file"
    default_code = 100503
