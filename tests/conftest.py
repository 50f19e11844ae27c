import logging

import pytest

from decifix.literal import _evaluate_literal
from decifix.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_decifix_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def clear_literal_cache():
    """
    Discard memoized literal evaluations before and after the test
    """
    _evaluate_literal.cache_clear()
    yield
    _evaluate_literal.cache_clear()
