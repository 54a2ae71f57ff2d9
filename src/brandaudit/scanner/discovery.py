"""Depth-first discovery of text-like files under a scan root."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Collection, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[Path, OSError], None]


def should_exclude_dir(name: str, exclude_dirs: Collection[str]) -> bool:
    return name in exclude_dirs


def should_scan_file(name: str, extensions: Collection[str]) -> bool:
    """Return True when the file suffix, compared case-insensitively, is allow-listed."""
    return os.path.splitext(name)[1].lower() in extensions


def iter_text_files(
    root: Path,
    exclude_dirs: Collection[str],
    extensions: Collection[str],
    *,
    on_error: ErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield scannable files under *root*, depth first, in directory enumeration order.

    Entries are not sorted, so sibling order follows the filesystem. A
    directory that cannot be listed is logged, handed to *on_error* and
    skipped without affecting its siblings. Symlinked directories are not
    followed.
    """
    try:
        with os.scandir(root) as entries:
            children = list(entries)
    except OSError as exc:
        logger.error("Error scanning directory %s: %s", root, exc.strerror or exc)
        if on_error is not None:
            on_error(root, exc)
        return

    for entry in children:
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            logger.error("Error reading entry %s: %s", path, exc.strerror or exc)
            if on_error is not None:
                on_error(path, exc)
            continue

        if is_dir:
            if not should_exclude_dir(entry.name, exclude_dirs):
                yield from iter_text_files(path, exclude_dirs, extensions, on_error=on_error)
        elif is_file and should_scan_file(entry.name, extensions):
            yield path
