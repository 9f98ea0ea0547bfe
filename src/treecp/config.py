from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import json
import yaml

from treecp.progress import ProgressOptions


@dataclass(slots=True)
class CopyConfig:
    progress: ProgressOptions = field(default_factory=ProgressOptions)
    show_filename: bool = False
    verbose: bool = False
    log_file: Path | None = None


def _as_path(value: Any, field_name: str) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string path")
    return Path(value).expanduser()


def _as_bool(value: Any, field_name: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ValueError(f"{field_name} must be a boolean")


def _as_optional_positive_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field_name} must be a positive integer")
    return value


def _load_raw_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ValueError(f"Config file does not exist: {config_path}")

    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in {".yml", ".yaml"}:
        loaded = yaml.safe_load(text)
    elif suffix == ".json":
        loaded = json.loads(text)
    else:
        raise ValueError("Config file must be .yaml/.yml or .json")

    # An empty YAML document means "all defaults".
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError("Config root must be an object")
    return loaded


def _parse_progress_bar(raw: Any, enabled: bool) -> ProgressOptions:
    if raw is None:
        return ProgressOptions(enabled=enabled)
    if not isinstance(raw, dict):
        raise ValueError("progressBar must be an object")
    return ProgressOptions(
        enabled=enabled,
        ncols=_as_optional_positive_int(raw.get("ncols"), "progressBar.ncols"),
        leave=_as_bool(raw.get("leave"), "progressBar.leave", default=True),
        unit_scale=_as_bool(raw.get("unitScale"), "progressBar.unitScale", default=True),
    )


def load_config(config_path: Path) -> CopyConfig:
    raw = _load_raw_config(config_path)

    enabled = _as_bool(raw.get("progress"), "progress", default=True)
    raw_log_file = raw.get("logFile")
    log_file = _as_path(raw_log_file, "logFile") if raw_log_file is not None else None

    return CopyConfig(
        progress=_parse_progress_bar(raw.get("progressBar"), enabled),
        show_filename=_as_bool(raw.get("showFilename"), "showFilename", default=False),
        verbose=_as_bool(raw.get("verbose"), "verbose", default=False),
        log_file=log_file,
    )


def merge_cli_overrides(
    config: CopyConfig,
    no_progress: bool = False,
    show_filename: bool = False,
    verbose: bool = False,
    log_file: Path | None = None,
) -> CopyConfig:
    """Apply command-line flags on top of file values; flags only ever switch options on."""
    progress = replace(config.progress, enabled=False) if no_progress else config.progress
    return CopyConfig(
        progress=progress,
        show_filename=config.show_filename or show_filename,
        verbose=config.verbose or verbose,
        log_file=log_file if log_file is not None else config.log_file,
    )
