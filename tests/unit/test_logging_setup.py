"""
Unit tests for peershare.logging_setup module.

Created by orpheus497
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from rich.logging import RichHandler

from peershare import crypto
from peershare.config import Config
from peershare.errors import AuthenticationFailure
from peershare.logging_setup import setup_logging


def test_console_handler(temp_dir, clean_env):
    """Test that the default configuration logs to a rich console handler."""
    logger = setup_logging(Config(temp_dir / "config.toml"))

    assert logger.name == "peershare"
    assert logger.level == logging.WARNING
    assert any(isinstance(h, RichHandler) for h in logger.handlers)


def test_file_logging(temp_dir, clean_env):
    """Test the rotating file handler and that secrets are never logged."""
    log_file = temp_dir / "logs" / "peershare.log"
    config = Config(temp_dir / "config.toml")
    config.set("logging", "file_logging", True)
    config.set("logging", "console_logging", False)
    config.set("logging", "log_file", str(log_file))

    logger = setup_logging(config, level="debug")
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

    key = crypto.generate_key()
    envelope = crypto.encrypt_text("very private words", key)
    with pytest.raises(AuthenticationFailure):
        crypto.decrypt_text(envelope, crypto.generate_key())

    for handler in logger.handlers:
        handler.flush()

    contents = log_file.read_text()
    assert "Authentication failed" in contents
    assert key not in contents
    assert "very private words" not in contents

    setup_logging(Config(temp_dir / "none.toml"))


def test_no_handlers(temp_dir, clean_env):
    """Test that disabling all outputs installs a NullHandler."""
    config = Config(temp_dir / "config.toml")
    config.set("logging", "console_logging", False)

    logger = setup_logging(config)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
