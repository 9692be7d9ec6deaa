"""HTML document emitter.

Every call writes its markup immediately to the context's sink, indented to
the current nesting depth. Opening calls (tag, ul, table, ...) must be matched
by their closing counterparts; headings are numbered automatically and
collected for the table of contents, which is rendered with toc() at the end
of the document.

Text, titles and attribute strings are written verbatim, so they may carry
inline HTML. Escape characters such as < and > yourself where needed.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .context import DocumentContext
from .errors import AssetError
from .style import DEFAULT_THEME, default_rules
from .toc import DEFAULT_TOC_TITLE, TocRenderResult

logger = logging.getLogger(__name__)


def _start(name: str, attrs: str | None = None) -> str:
    if attrs:
        return f"<{name} {attrs}>"
    return f"<{name}>"


class HtmlDocument:
    """Emits indented, numbered HTML for one document."""

    def __init__(self, context: DocumentContext | None = None):
        self.context = context if context is not None else DocumentContext()
        self._out = self.context.indent

    # Primitives

    def tag(self, name: str, attrs: str | None = None) -> None:
        """Open an element, e.g. tag("div", 'class="note"')."""
        self._out.open(_start(name, attrs))

    def end(self, name: str) -> None:
        """Close an element opened with tag()."""
        self._out.close(f"</{name}>")

    def void(self, name: str, attrs: str | None = None) -> None:
        """Emit an element without children (img, br, hr, ...)."""
        self._out.void(_start(name, attrs))

    @contextmanager
    def element(self, name: str, attrs: str | None = None) -> Iterator[None]:
        """Open an element for the duration of a with block.

        The closing tag is only written when the block completes; after an
        error the document is abandoned anyway.
        """
        self.tag(name, attrs)
        yield
        self.end(name)

    def text(self, txt: str) -> None:
        """Emit an indented line of text."""
        self._out.line(txt)

    def raw(self, txt: str) -> None:
        """Emit text exactly as given: no indentation, no newline."""
        self._out.raw(txt)

    # Document structure

    def root(self, attrs: str | None = None) -> None:
        self.tag("html", attrs)

    def end_root(self) -> None:
        self.end("html")

    def head(self) -> None:
        self.tag("head")

    def end_head(self) -> None:
        self.end("head")

    def body(self, attrs: str | None = None) -> None:
        self.tag("body", attrs)

    def end_body(self) -> None:
        self.end("body")

    def title(self, txt: str) -> None:
        """Emit the document <title>; use inside head."""
        with self.element("title"):
            self.text(txt)

    # Styling

    def stylesheet(self, href: str) -> None:
        """Link an external stylesheet; use inside head."""
        self.void("link", f'rel="stylesheet" href="{href}"')

    def default_style(self, theme: str = DEFAULT_THEME) -> None:
        """Emit the built-in stylesheet inline; use inside head.

        Raises:
            ValueError: If the theme doesn't exist
        """
        rules = default_rules(theme)
        with self.element("style"):
            for rule in rules:
                if rule.inline:
                    self.text(f"{rule.selector} {{ {' '.join(rule.declarations)} }}")
                    continue
                self.text(f"{rule.selector} {{")
                with self._out.nested():
                    for declaration in rule.declarations:
                        self.text(declaration)
                self.text("}")

    def inline_style(self, path: Path | str) -> bool:
        """Emit the contents of a CSS file inside a <style> element.

        An unreadable file is skipped with a warning.

        Returns:
            True if the stylesheet was emitted
        """
        try:
            css = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping stylesheet %s: %s", path, e)
            return False

        with self.element("style"):
            for line in css.splitlines():
                if line.strip():
                    self.text(line.rstrip())
        return True

    # Headings

    def heading(self, level: int, title: str) -> str:
        """Emit a numbered heading and record it for the table of contents.

        Args:
            level: Heading level, 1 (h1) to 6 (h6)
            title: Heading text

        Returns:
            The chapter number, e.g. "2.1.", also used as the anchor id

        Raises:
            HeadingLevelError: If level is outside 1..6
            HeadingJumpError: If the heading skips a level under the strict policy
            TocCapacityError: If the table of contents is full
        """
        entry = self.context.record_heading(level, title)
        self.text(
            f'<h{level} id="{entry.number}">{entry.number} {entry.title}</h{level}>'
        )
        return entry.number

    def toc(self, max_depth: int = 0, title: str = DEFAULT_TOC_TITLE) -> TocRenderResult:
        """Emit the table of contents; use at the end of the document.

        The table of contents gets its own level-1 heading, which is numbered
        like any other but not listed.

        Args:
            max_depth: Deepest heading level to list; 0 lists every level
            title: Heading of the table of contents

        Returns:
            TocRenderResult with the number of listed entries
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be 0 or positive, got {max_depth}")

        with self.element("div", 'class="toc"'):
            self.heading(1, title)
            entries = self.context.toc.listing(max_depth)
            with self.element("ul"):
                for entry in entries:
                    self.text(
                        f'<li class="toc-L{entry.level}">'
                        f'<a href="#{entry.number}">{entry.number} {entry.title}</a></li>'
                    )

        logger.debug("Rendered table of contents with %d entries", len(entries))
        return TocRenderResult(entries=len(entries), depth=max_depth)

    # Code

    def code_block(self, txt: str) -> None:
        """Emit a <pre> block; whitespace and newlines are kept as written."""
        self._out.raw(f"{self._out.prefix()}<pre>{txt}</pre>\n")

    def code_inline(self, txt: str) -> None:
        with self.element("code"):
            self.text(txt)

    # Lists

    def li(self, txt: str) -> None:
        with self.element("li"):
            self.text(txt)

    def ul(self, attrs: str | None = None) -> None:
        self.tag("ul", attrs)

    def end_ul(self) -> None:
        self.end("ul")

    def ol(self, attrs: str | None = None) -> None:
        self.tag("ol", attrs)

    def end_ol(self) -> None:
        self.end("ol")

    # Tables

    def table(self, attrs: str | None = None) -> None:
        self.tag("table", attrs)

    def end_table(self) -> None:
        self.end("table")

    def row(self, attrs: str | None = None) -> None:
        self.tag("tr", attrs)

    def end_row(self) -> None:
        self.end("tr")

    def th(self, txt: str, attrs: str | None = None) -> None:
        """Emit a header cell; attrs may carry colspan, align, etc."""
        with self.element("th", attrs):
            self.text(txt)

    def td(self, txt: str, attrs: str | None = None) -> None:
        """Emit a data cell; attrs may carry colspan, align, etc."""
        with self.element("td", attrs):
            self.text(txt)

    def caption(self, txt: str) -> None:
        with self.element("caption"):
            self.text(txt)

    # Images

    def img(self, src: str, attrs: str | None = None) -> None:
        self.void("img", f'src="{src}" {attrs}' if attrs else f'src="{src}"')

    def img_embedded(self, path: Path | str, attrs: str | None = None) -> None:
        """Emit an image with the file's contents inlined as a data URI.

        Raises:
            AssetError: If the file cannot be read
        """
        self.img(data_uri(path), attrs)

    def figcaption(self, txt: str) -> None:
        with self.element("figcaption"):
            self.text(txt)

    # Breaking

    def linebreak(self, count: int = 1) -> None:
        for _ in range(count):
            self.void("br")

    def pagebreak(self) -> None:
        """Emit a page break for printing."""
        self.text('<div style="break-after: page;"></div>')

    # Misc

    def link(self, url: str, label: str) -> None:
        self.text(f'<a href="{url}">{label}</a>')

    def quote(self, txt: str, author: str | None = None) -> None:
        """Emit a block quote, with an attribution footer if author is given."""
        with self.element("blockquote"):
            with self.element("p"):
                self.text(txt)
            if author:
                with self.element("footer"):
                    self.text(f"— {author}")


def data_uri(path: Path | str) -> str:
    """Read a file and encode it as a base64 data URI.

    Raises:
        AssetError: If the file cannot be read
    """
    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as e:
        raise AssetError(f"Cannot read asset {path}: {e}") from e

    mime_type, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type or 'application/octet-stream'};base64,{encoded}"
