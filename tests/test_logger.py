# tests/test_logger.py
import logging
import pytest
from solgate.utils.logger import LOG_FORMAT, get_logger, setup_logging


class TestLogger:
    @pytest.fixture
    def logger_name(self):
        name = "solgate.tests.logger"
        yield name
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    @pytest.fixture
    def root_level(self):
        level = logging.getLogger().level
        yield
        logging.getLogger().setLevel(level)

    def test_attaches_stream_handler(self, logger_name):
        logger = get_logger(logger_name)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT
        assert logger.propagate is False

    def test_handler_added_once(self, logger_name):
        get_logger(logger_name)
        logger = get_logger(logger_name)

        assert len(logger.handlers) == 1

    def test_explicit_level(self, logger_name):
        assert get_logger(logger_name, logging.DEBUG).level == logging.DEBUG

    def test_setup_logging_sets_effective_level(self, logger_name, root_level):
        logger = get_logger(logger_name)

        setup_logging("debug")
        assert logger.getEffectiveLevel() == logging.DEBUG

        setup_logging("WARNING")
        assert logger.getEffectiveLevel() == logging.WARNING

    def test_setup_logging_unknown_level(self, root_level):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO
