"""Table of Contents registry for generated documents."""

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import TocCapacityError

DEFAULT_TOC_TITLE = "Table of Contents"

# Maximum number of headings a single document may record
DEFAULT_MAX_ENTRIES = 100


@dataclass(frozen=True)
class TocEntry:
    """A recorded heading."""

    title: str
    level: int
    number: str  # anchor id, e.g. "2.2.10."


@dataclass
class TocRenderResult:
    """Result of rendering the table of contents."""

    entries: int
    depth: int


class TocRegistry:
    """Append-only, bounded list of headings in document order."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: list[TocEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TocEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> list[TocEntry]:
        """Copy of the recorded entries in insertion order."""
        return list(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.max_entries

    def check_capacity(self, title: str = "") -> None:
        """Raise TocCapacityError if another entry would not fit."""
        if self.is_full:
            raise TocCapacityError(self.max_entries, title)

    def add(self, title: str, level: int, number: str) -> TocEntry:
        """Record a heading.

        Raises:
            TocCapacityError: If the registry already holds max_entries
        """
        self.check_capacity(title)
        entry = TocEntry(title=str(title), level=level, number=number)
        self._entries.append(entry)
        return entry

    def listing(self, max_depth: int = 0) -> list[TocEntry]:
        """Entries to render in a table of contents.

        The last recorded entry is the table of contents' own heading and is
        always left out, by position rather than by title.

        Args:
            max_depth: Deepest heading level to include; 0 includes all levels

        Returns:
            Entries in document order
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be 0 or positive, got {max_depth}")
        return [
            entry
            for entry in self._entries[:-1]
            if max_depth == 0 or entry.level <= max_depth
        ]

    def clear(self) -> None:
        self._entries.clear()
