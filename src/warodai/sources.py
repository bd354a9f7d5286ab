"""
Warodai source tree access.

The Warodai source distribution keeps every entry in its own text file,
grouped into nested directories by entry id.
"""

import logging
import os
from pathlib import Path
from typing import Iterator


logger = logging.getLogger(__name__)


def iter_entry_files(source_dir: Path, suffix: str = ".txt") -> Iterator[Path]:
    """
    Yield entry files under source_dir in lexical order.

    Directories that cannot be listed are logged and skipped.
    """
    def on_error(error: OSError):
        logger.warning(f"Cannot read directory: {error}")

    for dirpath, dirnames, filenames in os.walk(source_dir, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(suffix):
                yield Path(dirpath) / filename


def read_entry(path: Path) -> str:
    """Read one entry file. Read errors propagate to the caller."""
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()
