import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers that setup_logging attached during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
