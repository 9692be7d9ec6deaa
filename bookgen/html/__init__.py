"""Incremental HTML emission with numbered headings and a table of contents."""

from .context import DocumentContext
from .document import HtmlDocument, data_uri
from .errors import (
    AssetError,
    BookGenError,
    DocumentContractError,
    HeadingJumpError,
    HeadingLevelError,
    OutlineError,
    TocCapacityError,
    UnbalancedCloseError,
)
from .indent import IndentTracker
from .numbering import ChapterNumberer, HeadingPolicy
from .sink import open_output
from .toc import DEFAULT_TOC_TITLE, TocEntry, TocRegistry, TocRenderResult

__all__ = [
    "DocumentContext",
    "HtmlDocument",
    "data_uri",
    "IndentTracker",
    "ChapterNumberer",
    "HeadingPolicy",
    "TocEntry",
    "TocRegistry",
    "TocRenderResult",
    "DEFAULT_TOC_TITLE",
    "open_output",
    "BookGenError",
    "DocumentContractError",
    "HeadingLevelError",
    "HeadingJumpError",
    "TocCapacityError",
    "UnbalancedCloseError",
    "AssetError",
    "OutlineError",
]
