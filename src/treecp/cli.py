from __future__ import annotations

import argparse
import contextlib
import logging
from pathlib import Path
import sys

from tqdm.contrib.logging import logging_redirect_tqdm

from treecp.config import CopyConfig, load_config, merge_cli_overrides
from treecp.logging_setup import LOGGER_NAME, configure_logging, set_console_level
from treecp.run_service import EXIT_INVALID_CONFIG, run_copy


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treecp",
        description="Copy a directory tree while showing byte progress",
    )
    parser.add_argument("source", metavar="SOURCE", type=Path, help="Existing directory to copy")
    parser.add_argument(
        "destination",
        metavar="DESTINATION",
        type=Path,
        help="Directory to create; must not exist yet",
    )
    parser.add_argument("--config", type=Path, help="YAML or JSON file with copy options")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument(
        "--show-filename",
        action="store_true",
        help="Show the file being copied next to the progress bar",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print every copied file")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    return parser


def _load_effective_config(args: argparse.Namespace) -> CopyConfig:
    config = load_config(args.config) if args.config is not None else CopyConfig()
    return merge_cli_overrides(
        config,
        no_progress=args.no_progress,
        show_filename=args.show_filename,
        verbose=args.verbose,
        log_file=args.log_file,
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_effective_config(args)
    except Exception as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    logger = configure_logging(verbose=config.verbose, log_file=config.log_file)

    redirect = (
        logging_redirect_tqdm(loggers=[logger])
        if config.progress.enabled
        else contextlib.nullcontext()
    )
    with redirect:
        set_console_level(logger, config.verbose)
        exit_code, _ = run_copy(
            source=args.source,
            destination=args.destination,
            config=config,
            logger=logging.getLogger(f"{LOGGER_NAME}.run"),
        )
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
