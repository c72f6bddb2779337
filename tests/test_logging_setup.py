import logging

import pytest

from beamdesign import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("beamdesign")
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(saved_level)


def test_setup_logging_writes_file(tmp_path, clean_logger):
    logger = setup_logging(log_dir=str(tmp_path / "logs"), level=logging.DEBUG)
    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    logging.getLogger("beamdesign.statics").info("hello")
    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / "logs" / "beamdesign.log").read_text(encoding="utf-8")
    assert "Logging initialised" in text
    assert "hello" in text


def test_setup_logging_is_idempotent(tmp_path, clean_logger):
    setup_logging(log_dir=str(tmp_path))
    count = len(clean_logger.handlers)
    setup_logging(log_dir=str(tmp_path))
    assert len(clean_logger.handlers) == count == 2


def test_setup_logging_again_changes_level(tmp_path, clean_logger):
    setup_logging(log_dir=str(tmp_path), level=logging.INFO)
    setup_logging(log_dir=str(tmp_path), level="WARNING")
    assert clean_logger.level == logging.WARNING
    assert all(handler.level == logging.WARNING for handler in clean_logger.handlers)
