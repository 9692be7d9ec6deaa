"""Indentation tracking for emitted markup."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from .errors import UnbalancedCloseError

DEFAULT_INDENT = "  "


class TextSink(Protocol):
    """Anything that accepts text, e.g. a file object or io.StringIO."""

    def write(self, text: str) -> object: ...


class IndentTracker:
    """Writes lines prefixed with whitespace proportional to the nesting depth.

    Every structural open increases the depth and every close decreases it.
    Keeping opens and closes balanced is the caller's job, like parentheses.
    """

    def __init__(self, sink: TextSink, unit: str = DEFAULT_INDENT):
        self.sink = sink
        self.unit = unit
        self._depth = 0

    @property
    def depth(self) -> int:
        """Current nesting depth."""
        return self._depth

    @property
    def is_balanced(self) -> bool:
        """True when every open has been matched by a close."""
        return self._depth == 0

    def prefix(self) -> str:
        """Whitespace for the current depth."""
        return self.unit * self._depth

    def line(self, text: str) -> None:
        """Write one line at the current depth."""
        self.sink.write(f"{self.prefix()}{text}\n")

    def raw(self, text: str) -> None:
        """Write text as-is, without indentation or newline."""
        self.sink.write(text)

    def open(self, text: str) -> None:
        """Write an opening line, then nest one level deeper."""
        self.line(text)
        self._depth += 1

    def close(self, text: str) -> None:
        """Step out one level, then write the closing line at the parent's depth.

        Raises:
            UnbalancedCloseError: If there is no open level to close. Nothing
                is written and the depth stays at zero.
        """
        if self._depth == 0:
            raise UnbalancedCloseError(text)
        self._depth -= 1
        self.line(text)

    def void(self, text: str) -> None:
        """Write a self-contained line; depth is unchanged."""
        self.line(text)

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Indent the lines written inside the block by one level."""
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def reset(self) -> None:
        self._depth = 0
