import logging

import pytest

from helpers.programs import ADD, MAX
from logger import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def add_source(tmp_path):
    path = tmp_path / "Add.asm"
    path.write_text(ADD, encoding="utf-8")
    return path


@pytest.fixture
def max_source(tmp_path):
    path = tmp_path / "Max.asm"
    path.write_text(MAX, encoding="utf-8")
    return path
