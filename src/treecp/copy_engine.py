from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import shutil
import tempfile

from treecp.models import CopyStats, EntryKind, ProgressState, TreeEntry
from treecp.progress import ProgressOptions, ProgressReporter
from treecp.walker import iter_entries


logger = logging.getLogger("treecp.copy")


@dataclass(slots=True)
class CopyOptions:
    show_filename: bool = False
    progress: ProgressOptions = field(default_factory=ProgressOptions)


def _safe_copy(source_file: Path, destination_file: Path) -> None:
    with tempfile.NamedTemporaryFile(delete=False, dir=str(destination_file.parent)) as tmp:
        tmp_path = Path(tmp.name)
    try:
        shutil.copy2(source_file, tmp_path)
        tmp_path.replace(destination_file)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def _label_for(entry: TreeEntry, source_root: Path, options: CopyOptions) -> str | None:
    if not options.show_filename:
        return None
    return entry.path.relative_to(source_root).as_posix()


def copy_directory_recursive(
    source: Path,
    destination: Path,
    state: ProgressState,
    reporter: ProgressReporter,
    options: CopyOptions,
    stats: CopyStats,
    source_root: Path,
) -> None:
    # No exist_ok: an existing destination is a collision, not a merge.
    destination.mkdir()
    stats.directories += 1

    for entry in iter_entries(source):
        target = destination / entry.name

        if entry.kind is EntryKind.DIRECTORY:
            copy_directory_recursive(entry.path, target, state, reporter, options, stats, source_root)
            continue

        if entry.kind is EntryKind.OTHER:
            stats.skipped += 1
            logger.debug("Skipping non-regular entry: %s", entry.path)
            continue

        size = entry.size()
        state.advance(size)
        _safe_copy(entry.path, target)
        stats.files += 1
        stats.bytes_copied += size
        logger.info("cp: %s => %s", entry.path, target)

        reporter.report(state.current, state.total, _label_for(entry, source_root, options), options.progress)


def copy_tree(
    source: Path,
    destination: Path,
    total: int,
    reporter: ProgressReporter,
    options: CopyOptions | None = None,
    stats: CopyStats | None = None,
) -> CopyStats:
    """Replicate ``source`` into the not-yet-existing ``destination``.

    ``total`` is the byte count from the scan pass and stays fixed for every
    report. The first error aborts the copy and leaves whatever was already
    written in place.
    """
    effective = options or CopyOptions()
    state = ProgressState(total=total)
    stats = stats if stats is not None else CopyStats()
    copy_directory_recursive(source, destination, state, reporter, effective, stats, source)
    return stats
