"""Exceptions raised while generating an HTML document."""


class BookGenError(Exception):
    """Base class for all BookGen errors."""


class DocumentContractError(BookGenError):
    """The sequence of document calls is wrong.

    These are authoring errors, not runtime conditions: generation must stop
    rather than emit malformed numbering or a corrupted table of contents.
    """


class HeadingLevelError(DocumentContractError):
    """Heading level outside 1..6."""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"Heading level must be between 1 and 6, got {level}")


class HeadingJumpError(DocumentContractError):
    """Heading skips a level under the strict heading policy."""

    def __init__(self, level: int, title: str):
        self.level = level
        self.title = title
        super().__init__(
            f"Heading '{title}' at level {level} has no preceding level {level - 1} heading"
        )


class TocCapacityError(DocumentContractError):
    """The table of contents registry is full."""

    def __init__(self, capacity: int, title: str):
        self.capacity = capacity
        self.title = title
        super().__init__(
            f"Cannot record heading '{title}': table of contents is full "
            f"({capacity} entries). Increase max_entries."
        )


class UnbalancedCloseError(DocumentContractError):
    """A close was requested with no matching open."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Unmatched close at depth 0: {line!r}")


class AssetError(BookGenError):
    """An asset to embed in the document could not be read."""


class OutlineError(BookGenError, ValueError):
    """A document outline is malformed."""
