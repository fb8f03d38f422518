# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup and warning capture

import logging
import os
import warnings
from unittest.mock import patch

import structlog
from loguru import logger

from kontent_normalizer.errors import MalformedAssetUrlWarning
from kontent_normalizer.utils.logging.config import (
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


class TestLoggingMode:
    def test_logging_mode_constants(self):
        assert LoggingMode.INTERACTIVE == "interactive"
        assert LoggingMode.PRODUCTION == "production"


class TestDetectLoggingMode:
    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"KONTENT_NORMALIZER_LOG_MODE": "production"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_invalid(self):
        with (
            patch.dict(os.environ, {"KONTENT_NORMALIZER_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    def teardown_method(self):
        logging.captureWarnings(False)
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)
        structlog.reset_defaults()
        logger.remove()

    def test_production_mode_logs_json_to_stderr(self, capsys):
        """stdout stays free for the normalized document."""
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        structlog.get_logger("kontent_normalizer.test").info("hello", item_codename="post")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello" in captured.err
        assert "post" in captured.err

    def test_sets_root_level(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_interactive_mode_writes_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")
        logger.info("to file")
        logger.complete()

        assert (tmp_path / "logs" / "kontent-normalizer.log").exists()

    def test_malformed_url_warning_is_logged(self, capsys):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.warn(MalformedAssetUrlWarning("bad url"), stacklevel=1)

        assert "MalformedAssetUrlWarning" in capsys.readouterr().err


class TestGetLoggingStatus:
    def test_production_status_has_no_files(self):
        with patch.dict(os.environ, {"KONTENT_NORMALIZER_LOG_MODE": "production"}):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.PRODUCTION
        assert status["log_files"] == {"main": None, "json": None, "errors": None}

    def test_interactive_status_lists_files(self):
        with patch.dict(os.environ, {"KONTENT_NORMALIZER_LOG_MODE": "interactive"}):
            status = get_logging_status()

        assert status["log_files"]["main"].endswith("kontent-normalizer.log")
        assert "captured_warnings" in status
