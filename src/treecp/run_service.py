from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging

from treecp.config import CopyConfig
from treecp.copy_engine import CopyOptions, copy_tree
from treecp.models import CopyStats
from treecp.progress import ProgressReporter, build_reporter
from treecp.scanner import scan_total_size


EXIT_SUCCESS = 0
EXIT_COPY_ERROR = 1
EXIT_INVALID_ARGUMENTS = 2
EXIT_INVALID_CONFIG = 3
EXIT_SCAN_ERROR = 4


@dataclass(slots=True)
class RunSummary:
    total_bytes: int = 0
    copied_bytes: int = 0
    files: int = 0
    directories: int = 0
    skipped: int = 0
    failed_phase: str | None = None

    def absorb(self, stats: CopyStats) -> None:
        self.copied_bytes = stats.bytes_copied
        self.files = stats.files
        self.directories = stats.directories
        self.skipped = stats.skipped


def validate_paths(source: Path, destination: Path) -> None:
    if not source.is_dir():
        raise ValueError(f"Source directory does not exist or is not a directory: {source}")

    source_resolved = source.resolve()
    destination_resolved = destination.resolve()

    if source_resolved == destination_resolved:
        raise ValueError(f"Invalid paths: source and destination are equal: {source}")

    if destination_resolved.is_relative_to(source_resolved):
        raise ValueError(
            f"Invalid paths: destination is inside source, which can recurse: {destination}"
        )


def run_copy(
    source: Path,
    destination: Path,
    config: CopyConfig | None = None,
    reporter: ProgressReporter | None = None,
    logger: logging.Logger | None = None,
) -> tuple[int, RunSummary]:
    log = logger or logging.getLogger("treecp.run")
    effective = config or CopyConfig()
    summary = RunSummary()

    try:
        validate_paths(source, destination)
    except ValueError as exc:
        summary.failed_phase = "validate"
        log.error("%s", exc)
        return EXIT_INVALID_ARGUMENTS, summary

    try:
        summary.total_bytes = scan_total_size(source)
    except OSError as exc:
        summary.failed_phase = "scan"
        log.error("Scan failed for %s: %s", source, exc)
        return EXIT_SCAN_ERROR, summary

    active_reporter = reporter or build_reporter(effective.progress)
    options = CopyOptions(show_filename=effective.show_filename, progress=effective.progress)
    stats = CopyStats()
    try:
        copy_tree(source, destination, summary.total_bytes, active_reporter, options, stats=stats)
    except OSError as exc:
        summary.failed_phase = "copy"
        log.error("Copy failed from %s into %s: %s", source, destination, exc)
        return EXIT_COPY_ERROR, summary
    finally:
        active_reporter.close()
        summary.absorb(stats)

    log.info(
        "%s -> %s | files=%s directories=%s skipped=%s bytes=%s/%s",
        source,
        destination,
        stats.files,
        stats.directories,
        stats.skipped,
        stats.bytes_copied,
        summary.total_bytes,
    )
    return EXIT_SUCCESS, summary
