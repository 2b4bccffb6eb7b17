# File: tests/test_cli.py
"""Тесты для CLI (`sitemap_gen/cli.py`) с использованием click.testing.CliRunner.
Проверяют команды `generate`, `pages`, `config`, `--version`, а также обработку ошибок.
"""
import json

import click
import pytest
from click.testing import CliRunner
from lxml import etree

from sitemap_gen.cli import cli


@pytest.fixture()
def runner():
    return CliRunner()


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "sitemap_gen, version 0.1.0" in result.output


def test_generate_default_xml(runner, out_dir):
    result = runner.invoke(cli, ["generate", f"--file_path={out_dir}"])
    assert result.exit_code == 0, result.output
    target = out_dir / "sitemap.xml"
    assert target.is_file()
    assert result.output.count(f"File is ready by path: {target}") == 1
    assert "Completed" in result.output
    root = etree.fromstring(target.read_bytes())
    assert len(root) == 6


def test_generate_reports_progress(runner, out_dir):
    result = runner.invoke(cli, ["generate", "--file_type=json", f"--file_path={out_dir}"])
    assert result.exit_code == 0, result.output
    assert "Getting ready to generate the file sitemap_" in result.output
    assert "Found 6 items. Start processing..." in result.output


def test_generate_csv(runner, out_dir):
    result = runner.invoke(cli, ["generate", "--file_type", "csv", "--file_path", str(out_dir)])
    assert result.exit_code == 0, result.output
    lines = (out_dir / "sitemap.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "loc;lastmod;priority;changefreq"
    assert lines[1] == "https://site.ru/;2020-12-14;1;hourly"


def test_generate_unsupported_format(runner, out_dir):
    result = runner.invoke(cli, ["generate", "--file_type=yaml", f"--file_path={out_dir}"])
    assert result.exit_code == 1
    assert "Unsupported sitemap file type: 'yaml'" in result.output
    assert not out_dir.exists()


def test_generate_write_failure(runner, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    result = runner.invoke(cli, ["generate", f"--file_path={blocker / 'sub'}"])
    assert result.exit_code == 1
    assert "Unable to create directory" in result.output


def test_generate_with_pages_file(runner, tmp_path, out_dir):
    pages = tmp_path / "pages.json"
    pages.write_text(
        json.dumps([{"loc": "https://example.com/", "lastmod": "2021-01-01", "priority": 0.7, "changefreq": "daily"}]),
        encoding="utf-8",
    )
    result = runner.invoke(
        cli, ["generate", "--file_type=json", f"--file_path={out_dir}", "--pages", str(pages)]
    )
    assert result.exit_code == 0, result.output
    data = json.loads((out_dir / "sitemap.json").read_text(encoding="utf-8"))
    assert data == [{"loc": "https://example.com/", "lastmod": "2021-01-01", "priority": 0.7, "changefreq": "daily"}]


def test_generate_with_invalid_pages_file(runner, tmp_path, out_dir):
    pages = tmp_path / "pages.yaml"
    pages.write_text("- loc: not-a-url\n  lastmod: '2021-01-01'\n  priority: 2\n  changefreq: daily\n", encoding="utf-8")
    result = runner.invoke(cli, ["generate", f"--file_path={out_dir}", "--pages", str(pages)])
    assert result.exit_code == 1
    assert "Ошибка конфигурации" in result.output
    assert not out_dir.exists()


def test_generate_uses_config_file(runner, tmp_path):
    out = tmp_path / "from-config"
    cfg_file = tmp_path / "sitemap.yaml"
    cfg_file.write_text(f"file_type: csv\ndelimiter: ','\nfile_path: {out}\n", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "generate"])
    assert result.exit_code == 0, result.output
    assert (out / "sitemap.csv").read_text(encoding="utf-8").startswith("loc,lastmod,priority,changefreq")


def test_option_overrides_config_file(runner, tmp_path, out_dir):
    cfg_file = tmp_path / "sitemap.json"
    cfg_file.write_text(json.dumps({"file_type": "csv"}), encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "generate", "--file_type=json", f"--file_path={out_dir}"])
    assert result.exit_code == 0, result.output
    assert (out_dir / "sitemap.json").is_file()


def test_broken_config_file(runner, tmp_path):
    cfg_file = tmp_path / "broken.yaml"
    cfg_file.write_text("file_type: [unclosed", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "generate"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_generate_default_directory(runner, tmp_path, monkeypatch):
    monkeypatch.setattr(click, "get_app_dir", lambda name: str(tmp_path / "app"))
    result = runner.invoke(cli, ["generate", "--file_type=json"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "app" / "sitemaps" / "sitemap.json").is_file()


def test_show_pages(runner):
    result = runner.invoke(cli, ["pages"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert len(data) == 6
    assert data[0]["loc"] == "https://site.ru/"


def test_show_config(runner, tmp_path):
    cfg_file = tmp_path / "sitemap.yaml"
    cfg_file.write_text("file_type: json\n", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["file_type"] == "json"
    assert data["delimiter"] == ";"
    assert len(data["pages"]) == 6


def test_generate_control_character_in_pages(runner, tmp_path, out_dir):
    pages = tmp_path / "pages.json"
    pages.write_text(
        json.dumps([{"loc": "https://site.ru/\x01", "lastmod": "2021-01-01", "priority": 0.5, "changefreq": "daily"}]),
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["generate", f"--file_path={out_dir}", "--pages", str(pages)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "not XML compatible" in result.output
    assert "Traceback" not in result.output
    assert not out_dir.exists()


def test_generate_file_path_is_existing_file(runner, tmp_path):
    blocker = tmp_path / "sitemap.xml"
    blocker.write_text("", encoding="utf-8")
    result = runner.invoke(cli, ["generate", f"--file_path={blocker}"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unable to create directory" in result.output
