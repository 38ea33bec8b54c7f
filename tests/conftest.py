import logging

import pytest

from csrf_tokens import config as config_module
from csrf_tokens.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    for name in ("CSRF_TOKEN_ALPHABET", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
