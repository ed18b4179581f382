"""Shared pytest fixtures for all tests.

Fixtures build small books on disk and a recording generator that behaves
like a real one: it writes the derived output file of every page it gets.
"""

from pathlib import Path

import pytest

from folio.config import Config, load_settings
from folio.generation.paths import file_to_output
from folio.models.book import Book
from folio.models.generator import Generator, GeneratorOptions
from folio.models.output import Output
from folio.models.page import Page
from folio.models.summary import Summary


# Three-level book: README.md is the index, ch1/README.md introduces the
# chapter and ch1/page.md sits below it.
CHAPTER_ENTRIES = [
    {"title": "Introduction", "path": "README.md"},
    {
        "title": "Chapter 1",
        "path": "ch1/README.md",
        "articles": [{"title": "Page", "path": "ch1/page.md"}],
    },
]

CHAPTER_FILES = {
    "README.md": "# Introduction\n\nWelcome.\n",
    "ch1/README.md": "# Chapter 1\n",
    "ch1/page.md": "# Page\n\nSome text.\n",
}


class RecordingGenerator(Generator):
    """Generator recording every callback and writing derived page output."""

    name = "recording"

    def __init__(self):
        self.pages: list[str] = []
        self.assets: list[str] = []
        self.calls: list[str] = []

    async def on_init(self, output: Output) -> Output:
        self.calls.append(f"init:{output.book.language or ''}")
        return output

    async def on_asset(self, output: Output, asset_path: str) -> Output:
        self.assets.append(asset_path)
        return output

    async def on_page(self, output: Output, page: Page) -> Output:
        self.pages.append(page.path)
        derived = output.root / file_to_output(output, page.path)
        derived.parent.mkdir(parents=True, exist_ok=True)
        derived.write_text(f"<html>{page.content}</html>", encoding="utf-8")
        return output

    async def on_finish(self, output: Output) -> Output:
        self.calls.append(f"finish:{output.book.language or ''}")
        return output


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from FOLIO_* environment settings and cached settings."""
    monkeypatch.delenv("FOLIO_CONFIG", raising=False)
    monkeypatch.delenv("FOLIO_RESERVED_DIRS", raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def settings() -> Config:
    """Default generation settings."""
    return Config()


def write_files(root: Path, files: dict[str, str]) -> None:
    """Write ``files`` (relative path -> content) under ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def book(tmp_path) -> Book:
    """Three-level book written to tmp_path/book."""
    root = tmp_path / "book"
    write_files(root, CHAPTER_FILES)
    return Book(root=root, summary=Summary.from_entries(CHAPTER_ENTRIES))


@pytest.fixture
def output_root(tmp_path) -> Path:
    root = tmp_path / "out"
    root.mkdir()
    return root


@pytest.fixture
def output(book, output_root) -> Output:
    """Output of the three-level book with all its pages listed."""
    return Output(
        book=book,
        options=GeneratorOptions(root=output_root),
        generator=RecordingGenerator.name,
        pages=tuple(Page(path=path) for path in CHAPTER_FILES),
    )


@pytest.fixture
def generator() -> RecordingGenerator:
    return RecordingGenerator()
