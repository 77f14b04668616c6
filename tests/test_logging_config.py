#!/usr/bin/env python3
import logging

import pytest

from mvplugins.utils.logging_config import configure_logging, get_logger, resolve_level


def test_get_logger_is_cached():
    assert get_logger("PLUGINS") is get_logger("PLUGINS")
    assert get_logger("PLUGINS").name == "PLUGINS"


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level(None) == logging.INFO
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_logging_writes_files(tmp_path, restore_root_logger):
    configure_logging("DEBUG", log_directory=str(tmp_path))
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 3
    get_logger("PLUGINS").error("boom")
    for handler in root.handlers:
        handler.flush()
    names = sorted(p.name for p in tmp_path.iterdir())
    assert any(n.startswith("plugins_") for n in names)
    assert any(n.startswith("error_") for n in names)


def test_configure_logging_console_only(restore_root_logger):
    configure_logging(logging.WARNING, log_to_file=False)
    assert len(restore_root_logger.handlers) == 1
