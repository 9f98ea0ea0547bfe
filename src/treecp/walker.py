from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from treecp.models import EntryKind, TreeEntry


def _classify(entry: os.DirEntry) -> EntryKind:
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def iter_entries(directory: Path) -> Iterator[TreeEntry]:
    """Yield the entries of one directory in the order the OS returns them.

    Symlinks are never followed, so a link to a file or directory is
    reported as ``EntryKind.OTHER``.
    """
    with os.scandir(directory) as it:
        for entry in it:
            yield TreeEntry(name=entry.name, path=Path(entry.path), kind=_classify(entry))
