import logging

import pytest

from py_linvec.logger import logger
from py_linvec.settings import Settings

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def default_settings():
    Settings.restore_defaults()
    yield
    Settings.restore_defaults()
