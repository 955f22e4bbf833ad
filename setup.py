# setup.py
from setuptools import setup, find_packages

setup(
    name="news_scout",
    version="0.1.0",
    description="Асинхронный сборщик заголовков новостного сайта NewsScout",
    packages=find_packages(exclude=["tests", "tests.*"]),  # автоматически найдёт папку news_scout
    package_data={"news_scout": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "python-dateutil>=2.8",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "news-scout=news_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
