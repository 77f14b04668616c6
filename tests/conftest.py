#!/usr/bin/env python3
import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers added by configure_logging() during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
