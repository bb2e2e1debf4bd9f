import logging

import pytest

from trampolinedig.model.parameters import DigParameters


@pytest.fixture
def default_parameters() -> DigParameters:
    return DigParameters()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI attaches handlers to captured streams; drop them between tests."""
    yield
    logger = logging.getLogger("trampolinedig")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
