"""YAML document outlines.

An outline describes a whole document: metadata, table of contents settings
and a list of body blocks. Rendering replays the blocks through HtmlDocument
in order, so headings are numbered exactly as if the calls were made by hand.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from bookgen.config import BookgenConfig
from bookgen.html.document import HtmlDocument
from bookgen.html.errors import OutlineError

logger = logging.getLogger(__name__)

# Starter outline, a tour of what the emitter can do
DEFAULT_OUTLINE = """\
# BookGen document outline
# Body blocks are rendered in order; headings are numbered automatically.

document:
  title: "BookGen Example Document"
  lang: en
  stylesheet: default
  theme: light

toc:
  enabled: true
  depth: 0
  title: "Table of Contents"

body:
  - h1: "The first chapter header"
  - h2: "Author's Note"
  - text: "This book was generated entirely from a YAML outline."

  - h1: "The second chapter header"
  - h2: "Why an outline?"
  - text: "Honestly, simplicity!"
  - linebreak: 2
  - text: "Structure lives in one file, numbering and navigation come for free."

  - h2: "The indentation engine"
  - h3: "Nesting depth"
  - text: "By tracking the nesting depth"
  - inline_code: "depth"
  - text: "we ensure the HTML source is neatly indented."
  - h3: "The heading logic"
  - text: "Notice how the numbers below are generated automatically."
  - h4: "Specific Case A"
  - text: "Since text is written verbatim, <i><b>you can inject HTML</b></i>!"
  - h4: "Specific Case B"
  - link:
      url: "https://www.python.org"
      label: "Links have their own block."
  - quote:
      text: "I am quoting myself."
      author: "BookGen"
  - pagebreak: true

  - h2: "Code blocks"
  - text: "Whitespace and newlines in code blocks are preserved exactly as written."
  - code: |-
      def main():
          print("Hello from BookGen!")

  - h2: "Working with lists"
  - list:
      items:
        - "Item 1"
        - "Item 2"
        - list:
            ordered: true
            items: ["Subitem 1", "Subitem 2"]
        - "Item 3"

  - h2: "A simple table"
  - table:
      caption: "Heading levels"
      header: ["Level", "Element", "Example number"]
      rows:
        - ["1", "h1", "1."]
        - ["2", "h2", "1.1."]
        - ["3", "h3", "1.1.1."]
"""

# Available built-in templates
TEMPLATES = {
    "example": DEFAULT_OUTLINE,
}

STYLESHEET_DEFAULT = "default"
STYLESHEET_NONE = "none"


@dataclass
class DocumentSettings:
    """Document metadata from the outline's `document` section."""

    title: str = "Untitled Document"
    lang: str | None = None
    stylesheet: str = STYLESHEET_DEFAULT  # "default", "none", or an href
    inline_stylesheet: str | None = None  # CSS file to inline, relative to the outline
    theme: str | None = None  # None falls back to configuration


@dataclass
class TocSettings:
    """Table of contents settings from the outline's `toc` section."""

    enabled: bool = True
    depth: int | None = None
    title: str | None = None


@dataclass
class Outline:
    """Complete document outline."""

    document: DocumentSettings = field(default_factory=DocumentSettings)
    toc: TocSettings = field(default_factory=TocSettings)
    body: list[Any] = field(default_factory=list)

    # Metadata
    source_path: Path | None = None

    @property
    def base_dir(self) -> Path:
        """Directory that relative asset paths resolve against."""
        if self.source_path is not None:
            return self.source_path.parent
        return Path.cwd()


def load_outline(path: Path) -> Outline:
    """Load an outline from a YAML file.

    Args:
        path: Path to the YAML outline

    Returns:
        Outline parsed from the file

    Raises:
        FileNotFoundError: If file doesn't exist
        OutlineError: If the YAML or its structure is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Outline not found: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    return load_outline_from_string(content, source_path=path)


def load_outline_from_string(yaml_content: str, source_path: Path | None = None) -> Outline:
    """Load an outline from a YAML string.

    Useful for testing and built-in templates.
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise OutlineError(f"Invalid YAML: {e}") from e

    return _parse_outline(data, source_path=source_path)


def _parse_outline(data: Any, source_path: Path | None = None) -> Outline:
    if not data:
        raise OutlineError("Empty outline")
    if not isinstance(data, dict):
        raise OutlineError("Outline must be a mapping with document, toc and body sections")

    doc_data = _mapping(data.get("document"), "document")
    toc_data = data.get("toc", {})
    if isinstance(toc_data, bool):
        toc_data = {"enabled": toc_data}
    toc_data = _mapping(toc_data, "toc")

    document = DocumentSettings(
        title=str(doc_data.get("title", "Untitled Document")),
        lang=doc_data.get("lang"),
        stylesheet=str(doc_data.get("stylesheet", STYLESHEET_DEFAULT)),
        inline_stylesheet=doc_data.get("inline_stylesheet"),
        theme=doc_data.get("theme"),
    )

    depth = toc_data.get("depth")
    if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
        raise OutlineError(f"toc.depth must be 0 or a positive integer, got {depth!r}")

    toc = TocSettings(
        enabled=bool(toc_data.get("enabled", True)),
        depth=depth,
        title=toc_data.get("title"),
    )

    body = data.get("body") or []
    if not isinstance(body, list):
        raise OutlineError("body must be a list of blocks")

    return Outline(document=document, toc=toc, body=body, source_path=source_path)


def _mapping(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise OutlineError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def render_outline(
    outline: Outline, document: HtmlDocument, config: BookgenConfig | None = None
) -> int:
    """Render a complete outline as an HTML document.

    Settings left unset in the outline fall back to `config`.

    Args:
        outline: Outline to render
        document: Emitter to write through
        config: Defaults for theme and table of contents settings

    Returns:
        Number of headings recorded

    Raises:
        OutlineError: If a block is malformed
        DocumentContractError: If the headings violate numbering rules
    """
    config = config or BookgenConfig()
    settings = outline.document

    document.root(f'lang="{settings.lang}"' if settings.lang else None)

    document.head()
    document.title(settings.title)
    if settings.stylesheet == STYLESHEET_DEFAULT:
        document.default_style(settings.theme or config.style.theme)
    elif settings.stylesheet != STYLESHEET_NONE:
        document.stylesheet(settings.stylesheet)
    if settings.inline_stylesheet:
        document.inline_style(outline.base_dir / settings.inline_stylesheet)
    document.end_head()

    document.body()
    for index, block in enumerate(outline.body):
        render_block(document, block, base_dir=outline.base_dir, index=index)

    if outline.toc.enabled:
        depth = outline.toc.depth if outline.toc.depth is not None else config.toc.depth
        document.toc(depth, outline.toc.title or config.toc.title)
    document.end_body()

    document.end_root()

    headings = len(document.context.toc)
    logger.info("Rendered outline with %d headings", headings)
    return headings


def render_block(
    document: HtmlDocument, block: Any, *, base_dir: Path | None = None, index: int = 0
) -> None:
    """Render one body block.

    A block is a single-key mapping such as {"text": "..."}; a bare string
    is shorthand for a text block.

    Raises:
        OutlineError: If the block kind is unknown or its value is malformed
    """
    if isinstance(block, str):
        document.text(block)
        return

    if not isinstance(block, dict) or len(block) != 1:
        raise OutlineError(f"Block {index}: expected a single-key mapping, got {block!r}")

    ((kind, value),) = block.items()
    renderer = BLOCK_RENDERERS.get(kind)
    if renderer is None:
        available = ", ".join(sorted(BLOCK_RENDERERS))
        raise OutlineError(f"Block {index}: unknown block '{kind}'. Available: {available}")

    try:
        renderer(document, value, base_dir or Path.cwd())
    except (AttributeError, KeyError, TypeError) as e:
        raise OutlineError(f"Block {index} ({kind}): malformed value {value!r}: {e}") from e


def _title(value: Any) -> str:
    if value is None:
        raise TypeError("heading title is missing")
    return str(value)


def _heading(level: int) -> Callable[[HtmlDocument, Any, Path], None]:
    def render(document: HtmlDocument, value: Any, base_dir: Path) -> None:
        document.heading(level, _title(value))

    return render


def _render_heading(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    document.heading(value["level"], _title(value["title"]))


def _render_list(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    if isinstance(value, list):
        value = {"items": value}
    tag = "ol" if value.get("ordered", False) else "ul"
    with document.element(tag, value.get("attrs")):
        for item in value["items"]:
            if isinstance(item, dict) and set(item) == {"list"}:
                _render_list(document, item["list"], base_dir)
            else:
                document.li(str(item))


def _render_table(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    with document.element("table", value.get("attrs")):
        if value.get("caption"):
            document.caption(str(value["caption"]))
        if value.get("header"):
            with document.element("tr"):
                for cell in value["header"]:
                    document.th(str(cell))
        for row in value.get("rows", []):
            with document.element("tr"):
                for cell in row:
                    document.td(str(cell))


def _render_image(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    if isinstance(value, str):
        value = {"src": value}
    if value.get("embed", False):
        document.img_embedded(base_dir / value["src"], value.get("attrs"))
    else:
        document.img(value["src"], value.get("attrs"))


def _render_figure(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    with document.element("figure"):
        _render_image(document, value, base_dir)
        if value.get("caption"):
            document.figcaption(str(value["caption"]))


def _render_link(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    document.link(value["url"], str(value.get("label", value["url"])))


def _render_quote(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    if isinstance(value, str):
        value = {"text": value}
    document.quote(str(value["text"]), value.get("author"))


def _render_linebreak(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    count = 1 if value is None or value is True else value
    if not isinstance(count, int) or count < 0:
        raise TypeError(f"linebreak count must be a non-negative integer, got {value!r}")
    document.linebreak(count)


def _render_pagebreak(document: HtmlDocument, value: Any, base_dir: Path) -> None:
    if value is not False:
        document.pagebreak()


BLOCK_RENDERERS: dict[str, Callable[[HtmlDocument, Any, Path], None]] = {
    "heading": _render_heading,
    **{f"h{level}": _heading(level) for level in range(1, 7)},
    "text": lambda document, value, base_dir: document.text(str(value)),
    "raw": lambda document, value, base_dir: document.raw(str(value)),
    "code": lambda document, value, base_dir: document.code_block(str(value)),
    "inline_code": lambda document, value, base_dir: document.code_inline(str(value)),
    "list": _render_list,
    "table": _render_table,
    "image": _render_image,
    "figure": _render_figure,
    "link": _render_link,
    "quote": _render_quote,
    "linebreak": _render_linebreak,
    "pagebreak": _render_pagebreak,
}


def get_template(name: str) -> str:
    """Get a built-in outline template by name.

    Raises:
        ValueError: If template doesn't exist
    """
    if name not in TEMPLATES:
        available = ", ".join(TEMPLATES.keys())
        raise ValueError(f"Unknown template: {name}. Available: {available}")
    return TEMPLATES[name]
