"""Output sinks for generated documents."""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


@contextmanager
def open_output(path: Path | None = None, *, atomic: bool = False) -> Iterator[TextIO]:
    """Open the destination for a document.

    The stream is flushed and closed on every exit path, including errors.
    Standard output is flushed but never closed.

    Args:
        path: Output file, or None for standard output
        atomic: Write to a temporary file next to `path` and rename it into
            place only on success. On failure the target is left untouched.
            Without it, output written before a failure remains in the file.

    Yields:
        A writable text stream
    """
    if path is None:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    path = Path(path)
    if not atomic:
        with open(path, "w", encoding="utf-8") as f:
            yield f
        return

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yield f
        os.replace(tmp_path, path)
        logger.debug("Renamed %s to %s", tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        logger.debug("Discarded partial output %s", tmp_path)
        raise
