"""Tests for output sinks."""

import sys
from pathlib import Path

import pytest

from bookgen.html.context import DocumentContext
from bookgen.html.document import HtmlDocument
from bookgen.html.errors import HeadingLevelError
from bookgen.html.sink import open_output


def leftovers(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


class TestOpenOutput:
    """Test cases for open_output."""

    def test_stdout_is_not_closed(self, capsys):
        with open_output() as sink:
            sink.write("<p>hi</p>\n")

        assert sink is sys.stdout
        assert not sys.stdout.closed
        assert capsys.readouterr().out == "<p>hi</p>\n"

    def test_writes_file(self, tmp_path):
        target = tmp_path / "book.html"
        with open_output(target) as sink:
            sink.write("<html>\n")

        assert sink.closed
        assert target.read_text() == "<html>\n"

    def test_partial_output_remains_after_error(self, tmp_path):
        target = tmp_path / "book.html"

        with pytest.raises(HeadingLevelError):
            with open_output(target) as sink:
                document = HtmlDocument(DocumentContext(sink))
                document.heading(1, "Intro")
                document.heading(9, "Broken")

        assert sink.closed
        assert target.read_text() == '<h1 id="1.">1. Intro</h1>\n'

    def test_atomic_replaces_on_success(self, tmp_path):
        target = tmp_path / "book.html"
        target.write_text("old")

        with open_output(target, atomic=True) as sink:
            sink.write("new")
            assert target.read_text() == "old"

        assert target.read_text() == "new"
        assert leftovers(tmp_path) == ["book.html"]

    def test_atomic_keeps_target_on_error(self, tmp_path):
        target = tmp_path / "book.html"
        target.write_text("old")

        with pytest.raises(HeadingLevelError):
            with open_output(target, atomic=True) as sink:
                document = HtmlDocument(DocumentContext(sink))
                document.heading(1, "Intro")
                document.heading(0, "Broken")

        assert target.read_text() == "old"
        assert leftovers(tmp_path) == ["book.html"]

    def test_atomic_creates_new_file(self, tmp_path):
        target = tmp_path / "new.html"
        with open_output(target, atomic=True) as sink:
            sink.write("x")

        assert target.read_text() == "x"
