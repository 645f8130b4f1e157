import logging

import pytest

from fixed_point_math.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_fixed_point_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
