"""Pytest fixtures for HTML emitter tests."""

import io

import pytest

from bookgen.html.context import DocumentContext
from bookgen.html.document import HtmlDocument
from bookgen.html.numbering import HeadingPolicy


@pytest.fixture
def sink() -> io.StringIO:
    """An in-memory output sink."""
    return io.StringIO()


@pytest.fixture
def context(sink: io.StringIO) -> DocumentContext:
    """A fresh document context writing to the in-memory sink."""
    return DocumentContext(sink)


@pytest.fixture
def document(context: DocumentContext) -> HtmlDocument:
    """An HTML document with the default (relaxed) heading policy."""
    return HtmlDocument(context)


@pytest.fixture
def strict_document(sink: io.StringIO) -> HtmlDocument:
    """An HTML document that rejects headings skipping a level."""
    return HtmlDocument(DocumentContext(sink, policy=HeadingPolicy.STRICT))
