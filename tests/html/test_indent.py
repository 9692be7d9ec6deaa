"""Tests for indentation tracking."""

import io

import pytest

from bookgen.html.errors import DocumentContractError, UnbalancedCloseError
from bookgen.html.indent import IndentTracker


class TestIndentTracker:
    """Test cases for IndentTracker class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sink = io.StringIO()
        self.tracker = IndentTracker(self.sink)

    def lines(self) -> list[str]:
        return self.sink.getvalue().splitlines()

    def test_starts_at_depth_zero(self):
        assert self.tracker.depth == 0
        assert self.tracker.is_balanced is True

    def test_open_writes_then_nests(self):
        """The opening line is at the outer depth; content goes one level deeper."""
        self.tracker.open("<div>")
        self.tracker.line("text")

        assert self.lines() == ["<div>", "  text"]
        assert self.tracker.depth == 1

    def test_close_writes_at_parent_depth(self):
        """The closing line lines up with its opening line."""
        self.tracker.open("<ul>")
        self.tracker.open("<li>")
        self.tracker.line("item")
        self.tracker.close("</li>")
        self.tracker.close("</ul>")

        assert self.lines() == ["<ul>", "  <li>", "    item", "  </li>", "</ul>"]
        assert self.tracker.is_balanced is True

    def test_void_does_not_change_depth(self):
        self.tracker.open("<p>")
        self.tracker.void("<br>")
        self.tracker.void("<br>")

        assert self.lines() == ["<p>", "  <br>", "  <br>"]
        assert self.tracker.depth == 1

    def test_matched_sequence_restores_indentation(self):
        """Indentation before and after a balanced sequence is identical."""
        self.tracker.open("<body>")
        before = self.tracker.prefix()

        self.tracker.open("<table>")
        self.tracker.open("<tr>")
        self.tracker.void("<td>")
        self.tracker.close("</tr>")
        self.tracker.close("</table>")

        assert self.tracker.prefix() == before
        assert self.tracker.depth == 1

    def test_unmatched_close_raises(self):
        with pytest.raises(UnbalancedCloseError) as exc_info:
            self.tracker.close("</div>")

        assert isinstance(exc_info.value, DocumentContractError)
        assert "</div>" in str(exc_info.value)

    def test_unmatched_close_writes_nothing_and_keeps_depth(self):
        """An extra close leaves no trace and never goes negative."""
        self.tracker.open("<div>")
        self.tracker.close("</div>")

        with pytest.raises(UnbalancedCloseError):
            self.tracker.close("</div>")

        assert self.tracker.depth == 0
        self.tracker.line("<p>after</p>")
        assert self.lines() == ["<div>", "</div>", "<p>after</p>"]

    def test_nested_indents_block(self):
        self.tracker.line("body {")
        with self.tracker.nested():
            self.tracker.line("margin: 0;")
        self.tracker.line("}")

        assert self.lines() == ["body {", "  margin: 0;", "}"]
        assert self.tracker.depth == 0

    def test_nested_restores_depth_on_error(self):
        with pytest.raises(RuntimeError):
            with self.tracker.nested():
                raise RuntimeError("boom")

        assert self.tracker.depth == 0

    def test_raw_has_no_indent_or_newline(self):
        self.tracker.open("<div>")
        self.tracker.raw("x")
        self.tracker.raw("y")

        assert self.sink.getvalue() == "<div>\nxy"

    def test_custom_indent_unit(self):
        tracker = IndentTracker(self.sink, unit="\t")
        tracker.open("<a>")
        tracker.open("<b>")
        tracker.line("c")

        assert self.lines() == ["<a>", "\t<b>", "\t\tc"]

    def test_reset(self):
        self.tracker.open("<div>")
        self.tracker.open("<div>")
        self.tracker.reset()

        assert self.tracker.depth == 0
