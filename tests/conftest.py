import logging

import pytest

from enval import Lookuper, mapping_lookup

TEST_VARIABLES = {
    "STRING_PRESENT": ":80",
    "STRING_EMPTY": "",
    "INT_PRESENT": "16",
    "INT_INVALID": "b4dint34",
    "BOOL_PRESENT": "true",
    "BOOL_INVALID": "nOTtRueOrFalsE",
    "FLOAT_PRESENT": "0.25",
    "FLOAT_INVALID": "1,5",
    "CUSTOM_PRESENT": '{"abc": 456}',
    "CUSTOM_INVALID": '}"abc": 456{',
}


@pytest.fixture
def test_variables():
    return dict(TEST_VARIABLES)


@pytest.fixture
def lookuper(test_variables):
    return Lookuper(mapping_lookup(test_variables))


@pytest.fixture(autouse=True)
def _reset_enval_logger():
    logger = logging.getLogger("enval")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield
    finally:
        for h in list(logger.handlers):
            if h not in handlers:
                logger.removeHandler(h)
        logger.setLevel(level)
