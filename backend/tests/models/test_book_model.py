"""Tests for Book, BookConfig, Page and Output models."""

from pathlib import Path

import pytest

from folio.models.book import Book
from folio.models.config import BookConfig
from folio.models.generator import GeneratorOptions
from folio.models.output import Output
from folio.models.page import Page
from folio.models.summary import Summary


class TestBookConfig:
    def test_get_dotted_key(self):
        config = BookConfig({"pluginsConfig": {"search": {"maxIndexSize": 100}}})

        assert config.get("pluginsConfig.search.maxIndexSize") == 100
        assert config.get("pluginsConfig.missing.key", "default") == "default"

    def test_get_values_returns_a_copy(self):
        config = BookConfig({"plugins": ["search"]})

        values = config.get_values()
        values["plugins"].append("other")

        assert config.get("plugins") == ["search"]

    def test_update_values_deep_merges_into_new_config(self):
        config = BookConfig({"title": "Book", "styles": {"website": "a.css", "pdf": "b.css"}})

        updated = config.update_values({"styles": {"pdf": "c.css"}, "language": "en"})

        assert updated.values == {
            "title": "Book",
            "styles": {"website": "a.css", "pdf": "c.css"},
            "language": "en",
        }
        assert config.get("styles.pdf") == "b.css"


class TestBook:
    @pytest.fixture
    def book(self, tmp_path: Path) -> Book:
        summary = Summary.from_entries(
            [
                {"title": "Intro", "path": "README.md"},
                {"title": "A", "path": "a.md", "articles": [{"title": "B", "path": "a/b.md"}]},
                {"title": "A again", "path": "a.md#details"},
            ]
        )
        return Book(root=tmp_path, summary=summary)

    def test_page_paths_start_with_readme_without_duplicates(self, book):
        assert book.page_paths() == ["README.md", "a.md", "a/b.md"]

    def test_is_referenced(self, book):
        assert book.is_referenced("README.md")
        assert book.is_referenced("a/b.md")
        assert not book.is_referenced("gone.md")

    def test_content_root_follows_root_config(self, tmp_path: Path):
        book = Book(root=tmp_path, config=BookConfig({"root": "docs"}))

        assert book.content_root == tmp_path / "docs"

    def test_content_root_defaults_to_root(self, book, tmp_path: Path):
        assert book.content_root == tmp_path

    def test_language_books(self, tmp_path: Path):
        en = Book(root=tmp_path / "en", language="en")
        fr = Book(root=tmp_path / "fr", language="fr")
        book = Book(root=tmp_path, books=(en, fr))

        assert book.is_multilingual()
        assert book.get_books() == [en, fr]
        assert book.get_language_book("fr") is fr
        assert book.get_language_book("de") is None
        assert not en.is_multilingual()


class TestPage:
    def test_with_content_keeps_attributes_unless_given(self):
        page = Page(path="a.md", attributes={"title": "A"})

        assert page.with_content("body").attributes == {"title": "A"}
        assert page.with_content("body", {}).attributes == {}
        assert page.content == ""


class TestOutput:
    def test_evolve_returns_new_output(self, tmp_path: Path):
        output = Output(book=Book(root=tmp_path), options=GeneratorOptions(root=tmp_path / "out"))

        evolved = output.evolve(pages=(Page(path="README.md"),))

        assert output.pages == ()
        assert evolved.get_page("README.md") == Page(path="README.md")
        assert evolved.get_page("other.md") is None
        assert evolved.root == tmp_path / "out"
