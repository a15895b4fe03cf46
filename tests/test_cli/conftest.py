import logging

import pytest


@pytest.fixture(autouse=True)
def restore_selectorkit_logger():
    """The CLI group reconfigures the package logger; undo it after each test."""
    log = logging.getLogger("selectorkit")
    level, handlers = log.level, list(log.handlers)
    yield
    log.setLevel(level)
    log.handlers = handlers
