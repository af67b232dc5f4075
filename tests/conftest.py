import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("fuzzy_align")
    level = logger.level
    handlers = list(logger.handlers)
    propagate = logger.propagate
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate
