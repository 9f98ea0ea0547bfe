import logging

import pytest

from treecp.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_treecp_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
