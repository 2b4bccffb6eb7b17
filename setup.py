# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_gen",
    version="0.1.0",
    description="Генератор sitemap-файлов в форматах xml, csv и json",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"sitemap_gen": ["data/*.yaml"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "lxml>=4.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["sitemap-gen=sitemap_gen.cli:cli"],
    },
    python_requires=">=3.11",
)
