"""
Tests for global logger setup.
"""

import logging

import pytest

from log import setup_global_logger


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def test_setup_writes_to_file(root_logger, tmp_path):
    log_file = tmp_path / "bookshelf.log"

    setup_global_logger(log_file_path=str(log_file), level=logging.INFO)
    logging.info("book added")

    for handler in root_logger.handlers:
        handler.flush()
    content = log_file.read_text()
    assert "INFO" in content
    assert "book added" in content


def test_setup_does_not_duplicate_handlers(root_logger, tmp_path):
    log_file = str(tmp_path / "bookshelf.log")

    setup_global_logger(log_file_path=log_file)
    count = len(root_logger.handlers)
    setup_global_logger(log_file_path=log_file, level=logging.DEBUG)

    assert len(root_logger.handlers) == count
    assert root_logger.level == logging.DEBUG


def test_setup_without_file(root_logger):
    before = list(root_logger.handlers)

    setup_global_logger(log_file_path="")

    added = [handler for handler in root_logger.handlers if handler not in before]
    assert not [handler for handler in added if isinstance(handler, logging.FileHandler)]


def test_setup_again_lowers_handler_level(root_logger, tmp_path):
    """Raising verbosity on a second call reaches the existing file handler."""
    log_file = tmp_path / "bookshelf.log"

    setup_global_logger(log_file_path=str(log_file), level=logging.INFO)
    setup_global_logger(log_file_path=str(log_file), level=logging.DEBUG)
    logging.debug("debug detail")

    for handler in root_logger.handlers:
        handler.flush()
    assert "debug detail" in log_file.read_text()
