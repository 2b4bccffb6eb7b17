"""Позволяет запускать генератор как ``python -m sitemap_gen``."""
from sitemap_gen.cli import cli

if __name__ == "__main__":  # pragma: no cover
    cli()
