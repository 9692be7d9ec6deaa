"""Hierarchical chapter numbering for document headings."""

import logging
from enum import Enum

from .errors import HeadingJumpError, HeadingLevelError

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 6


class HeadingPolicy(str, Enum):
    """How to treat a heading that skips a level (e.g. h1 followed by h3)."""

    RELAXED = "relaxed"  # skipped counters stay at zero: 1. -> 1.0.1.
    STRICT = "strict"  # rejected with HeadingJumpError


def format_number(counters: list[int], level: int) -> str:
    """Build a dot-terminated chapter number from the first `level` counters.

    Args:
        counters: Per-level counters, index 0 being level 1
        level: Heading level (1-based)

    Returns:
        Chapter number such as "2.1."
    """
    return "".join(f"{count}." for count in counters[:level])


def validate_level(level: int) -> None:
    """Raise HeadingLevelError unless 1 <= level <= 6."""
    if isinstance(level, bool) or not isinstance(level, int):
        raise HeadingLevelError(level)
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise HeadingLevelError(level)


class ChapterNumberer:
    """Tracks one counter per heading level and derives chapter numbers.

    Advancing a level increments its counter and resets every deeper level,
    so numbering restarts under each new parent: after 1.2.3. a new level-2
    heading is 1.3., not 1.2.4.
    """

    def __init__(self, policy: HeadingPolicy = HeadingPolicy.RELAXED):
        self.policy = HeadingPolicy(policy)
        self._counters = [0] * MAX_LEVEL

    @property
    def counters(self) -> list[int]:
        """Copy of the current counters, level 1 first."""
        return list(self._counters)

    def check(self, level: int, title: str = "") -> None:
        """Validate a heading without changing any state.

        Raises:
            HeadingLevelError: If level is outside 1..6
            HeadingJumpError: Under the strict policy, if the parent level
                has not been used since it was last reset
        """
        validate_level(level)
        if self.policy is HeadingPolicy.STRICT and level > MIN_LEVEL:
            if self._counters[level - 2] == 0:
                raise HeadingJumpError(level, title)

    def advance(self, level: int, title: str = "") -> str:
        """Count a new heading at `level` and return its chapter number."""
        self.check(level, title)

        self._counters[level - 1] += 1
        for i in range(level, MAX_LEVEL):
            self._counters[i] = 0

        number = format_number(self._counters, level)
        logger.debug("Numbered h%d '%s' as %s", level, title, number)
        return number

    def reset(self) -> None:
        self._counters = [0] * MAX_LEVEL
