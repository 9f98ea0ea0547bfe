from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os
from pathlib import Path


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True)
class TreeEntry:
    name: str
    path: Path
    kind: EntryKind

    def size(self) -> int:
        if self.kind is not EntryKind.FILE:
            raise ValueError(f"Only regular files have a size: {self.path}")
        return os.lstat(self.path).st_size


@dataclass(slots=True)
class ProgressState:
    total: int
    current: int = 0

    def advance(self, size: int) -> int:
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")
        self.current += size
        return self.current


@dataclass(slots=True)
class CopyStats:
    files: int = 0
    directories: int = 0
    skipped: int = 0
    bytes_copied: int = 0
