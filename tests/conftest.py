import logging

import numpy as np
import pytest


@pytest.fixture
def diagonal_matrix():
    return np.array([[2.0, 0.0], [0.0, 2.0]])


@pytest.fixture
def general_matrix():
    return np.array([[4.0, 7.0], [2.0, 6.0]])


@pytest.fixture
def clean_package_logger():
    logger = logging.getLogger("matrixcache")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
