"""Book, page and build-context models."""

from folio.models.book import Book
from folio.models.config import BookConfig
from folio.models.generator import Generator, GeneratorOptions
from folio.models.output import Output
from folio.models.page import Page
from folio.models.summary import Summary, SummaryArticle, SummaryPart

__all__ = [
    "Book",
    "BookConfig",
    "Generator",
    "GeneratorOptions",
    "Output",
    "Page",
    "Summary",
    "SummaryArticle",
    "SummaryPart",
]
