#!/usr/bin/env python3
"""
Точка входа для генерации sitemap через командную строку.

Команды:
  generate  Сгенерировать sitemap (xml, csv или json) и сохранить в директорию
  pages     Показать записи страниц, которые попадут в sitemap
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда generate опции:
  --file_type TYPE    Формат файла: xml, csv, json (default: xml)
  --file_path DIR     Директория для sitemap (default: <app dir>/sitemaps)
  --pages PATH        YAML/JSON-файл со списком страниц
  --delimiter CHAR    Разделитель столбцов CSV (default: ";")

Дополнительно:
  --version, -v       Показать версию

При любой ошибке выводится одна красная строка с причиной, код выхода 1.

Пример:
  sitemap-gen generate --file_type=csv --file_path=./public
"""
import json
import sys
from pathlib import Path

import click

from sitemap_gen import __version__
from sitemap_gen.config import GeneratorConfig, load_config
from sitemap_gen.errors import SitemapError
from sitemap_gen.generator import Generator
from sitemap_gen.logger import DEFAULT_FORMAT, init_logging
from sitemap_gen.pages import to_records
from sitemap_gen.serializer import SitemapFormat

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def prettylog(message: str, kind: str = "success"):
    # ход генерации пишет logger, здесь только итоговая строка
    if kind == "error":
        click.secho(message, fg="red", err=True)
    else:
        click.secho(message, fg="green")


def print_error(message: str):
    prettylog(message, "error")
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='sitemap_gen, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Генератор sitemap-файлов в форматах xml, csv, json."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('generate', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--file_type', '--file-type', '-f', 'file_type',
    default=None,
    help=f'Формат файла: {", ".join(SitemapFormat.choices())} [default: xml]'
)
@click.option(
    '--file_path', '--file-path', '-p', 'file_path',
    default=None,
    type=click.Path(path_type=Path),
    help='Директория для sitemap [default: <app dir>/sitemaps]'
)
@click.option(
    '--pages', 'pages_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON-файл со списком страниц'
)
@click.option(
    '--delimiter', '-d',
    default=None,
    help='Разделитель столбцов CSV [default: ;]'
)
@click.pass_context
def generate(ctx, file_type, file_path, pages_file, delimiter):
    """Сгенерировать sitemap и сохранить его в файл."""
    cfg = ctx.obj['config']
    overrides = {
        key: value
        for key, value in (
            ('file_type', file_type),
            ('file_path', file_path),
            ('delimiter', delimiter),
        )
        if value is not None
    }
    try:
        if pages_file is not None:
            # Страницы перечитываются из нового файла
            base = cfg.model_dump(exclude={'pages'})
            cfg = GeneratorConfig(**{**base, **overrides, 'pages_file': pages_file})
        elif overrides:
            cfg = GeneratorConfig(**{**cfg.model_dump(), **overrides})
    except (ValueError, OSError, TypeError) as e:
        print_error(f'Ошибка конфигурации: {e}')

    try:
        Generator(cfg).run()
    except SitemapError as e:
        print_error(f'Oops something unexpected happened :( {e}')

    prettylog('Completed ✓ You are excellent: )', 'success')


@cli.command('pages', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_pages(ctx):
    """Показать записи страниц в JSON."""
    cfg = ctx.obj['config']
    click.echo(json.dumps(to_records(cfg.pages), ensure_ascii=False, indent=2))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
