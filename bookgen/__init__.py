"""BookGen - generate indented, numbered HTML documents."""

from bookgen._version import __version__

__all__ = ["__version__"]
