from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

# Decimal gigabyte, matching what Finder reports.
LARGE_FOLDER_THRESHOLD = 1_000_000_000


def folder_size(path: str | os.PathLike[str]) -> int:
    """Total size in bytes of every regular file below ``path``.

    Symlinks are neither followed nor counted.

    Returns 0 when ``path`` is missing or is not a directory. Entries that
    vanish or cannot be stat'ed during the walk are skipped.
    """

    root = Path(path)
    if not root.is_dir():
        return 0

    total = 0
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            fp = os.path.join(dirpath, name)
            try:
                st = os.lstat(fp)
                if stat.S_ISREG(st.st_mode):
                    total += st.st_size
            except OSError:
                logger.debug("Skipping unreadable entry %s", fp)
    return total


def is_large_folder(size: int, *, threshold: int = LARGE_FOLDER_THRESHOLD) -> bool:
    return size > threshold


def format_gigabytes(size: int) -> str:
    return f"{size / 1_000_000_000:.2f} GB"
