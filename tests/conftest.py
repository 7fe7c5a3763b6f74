import logging

import pytest


@pytest.fixture(autouse=True)
def reset_msconv_logger():
    yield
    logger = logging.getLogger("msconv")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
