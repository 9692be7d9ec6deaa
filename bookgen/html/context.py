"""Per-document generation state."""

from __future__ import annotations

import logging
import sys

from .indent import DEFAULT_INDENT, IndentTracker, TextSink
from .numbering import ChapterNumberer, HeadingPolicy
from .toc import DEFAULT_MAX_ENTRIES, TocEntry, TocRegistry

logger = logging.getLogger(__name__)


class DocumentContext:
    """State for one document: indentation depth, chapter counters and TOC.

    A context belongs to exactly one document. Generate independent documents
    with independent contexts; share one only after calling reset().
    """

    def __init__(
        self,
        sink: TextSink | None = None,
        *,
        indent: str = DEFAULT_INDENT,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        policy: HeadingPolicy = HeadingPolicy.RELAXED,
    ):
        self.sink = sink if sink is not None else sys.stdout
        self.indent = IndentTracker(self.sink, indent)
        self.numberer = ChapterNumberer(policy)
        self.toc = TocRegistry(max_entries)

    @property
    def depth(self) -> int:
        return self.indent.depth

    def record_heading(self, level: int, title: str) -> TocEntry:
        """Number a heading and register it for the table of contents.

        Every precondition is checked before anything changes, so a rejected
        heading leaves counters and registry as they were.

        Raises:
            HeadingLevelError: If level is outside 1..6
            HeadingJumpError: If the heading skips a level under the strict policy
            TocCapacityError: If the registry is full
        """
        self.numberer.check(level, title)
        self.toc.check_capacity(title)
        number = self.numberer.advance(level, title)
        return self.toc.add(title, level, number)

    def reset(self) -> None:
        """Return to the zeroed state of a fresh document."""
        if not self.indent.is_balanced:
            logger.debug("Resetting context with open depth %d", self.indent.depth)
        self.indent.reset()
        self.numberer.reset()
        self.toc.clear()
