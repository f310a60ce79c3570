"""Tests for the logging helpers."""

import logging

import pytest

from render_engine.utils.logging import (
    ROOT_LOGGER_NAME,
    PerformanceLogger,
    get_default_log_file,
    log_exception,
    setup_logging,
)


@pytest.fixture
def clean_logger():
    """Remove handlers that setup_logging installs on the package logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestSetupLogging:
    def test_configures_package_logger(self, clean_logger):
        logger = setup_logging(console_level="WARNING")

        assert logger is clean_logger
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
        assert logger.level == logging.WARNING

    def test_idempotent(self, clean_logger):
        setup_logging()
        count = len(clean_logger.handlers)

        setup_logging()

        assert len(clean_logger.handlers) == count

    def test_file_handler(self, clean_logger, tmp_path):
        log_file = tmp_path / "logs" / "render.log"

        logger = setup_logging(log_file=str(log_file), console_level="ERROR", file_level="DEBUG")
        logging.getLogger(f"{ROOT_LOGGER_NAME}.tests").debug("hello from the tests")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "hello from the tests" in log_file.read_text()

    def test_default_log_file(self):
        path = get_default_log_file()
        assert ".wink_render" in path
        assert path.endswith(".log")


class TestLogException:
    def test_logs_with_traceback(self, caplog):
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.tests")
        try:
            raise ValueError("boom")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger=logger.name):
                log_exception(logger, e, "Failed")

        record = caplog.records[-1]
        assert record.getMessage() == "Failed: boom"
        assert record.exc_info[0] is ValueError


class TestPerformanceLogger:
    def test_start_end(self, caplog):
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.tests")
        perf = PerformanceLogger(logger, "Test")

        with caplog.at_level(logging.DEBUG, logger=logger.name):
            perf.start("stage")
            duration = perf.end("stage")

        assert duration >= 0
        assert "Test stage took" in caplog.text
        assert perf.start_times == {}

    def test_end_without_start(self, caplog):
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.tests")
        perf = PerformanceLogger(logger, "Test")

        with caplog.at_level(logging.WARNING, logger=logger.name):
            assert perf.end("never") == 0.0

        assert "No start time found for never" in caplog.text

    def test_clear(self):
        perf = PerformanceLogger(logging.getLogger(ROOT_LOGGER_NAME), "Test")
        perf.start("a")
        perf.clear()
        assert perf.start_times == {}
