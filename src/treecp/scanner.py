from __future__ import annotations

import logging
from pathlib import Path

from treecp.models import EntryKind
from treecp.walker import iter_entries


logger = logging.getLogger("treecp.scan")


def _scan_directory(directory: Path) -> int:
    total = 0
    for entry in iter_entries(directory):
        if entry.kind is EntryKind.DIRECTORY:
            total += _scan_directory(entry.path)
        elif entry.kind is EntryKind.FILE:
            total += entry.size()
    return total


def scan_total_size(root: Path) -> int:
    """Sum the sizes of every regular file below ``root``.

    Directories and other entry kinds (symlinks, devices, sockets) add
    nothing. Any unreadable directory or file aborts the scan.
    """
    if not root.is_dir():
        raise NotADirectoryError(f"Source is not a directory: {root}")

    total = _scan_directory(root)
    logger.debug("Scanned %s: %s bytes", root, total)
    return total
