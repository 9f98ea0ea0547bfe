from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOGGER_NAME = "treecp"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def set_console_level(logger: logging.Logger, verbose: bool) -> None:
    """Apply the console threshold to every non-file handler on ``logger``.

    Handlers swapped in by ``logging_redirect_tqdm`` start at NOTSET, so this
    is also called once the redirect is active.
    """
    level = logging.INFO if verbose else logging.WARNING
    for handler in logger.handlers:
        if not isinstance(handler, RotatingFileHandler):
            handler.setLevel(level)


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    set_console_level(logger, verbose)
    return logger
