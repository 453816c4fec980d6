import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from camparams.core.logging_config import configure_logging
from camparams.core.logging_utils import (
    StructuredLogger,
    get_module_logger,
)


class TestStructuredLogger:

    def test_module_logger_namespace_and_component(self):
        logger = get_module_logger("ValueCodec")
        assert logger.name == "camparams.ValueCodec"
        assert logger.component == "ValueCodec"

    def test_default_component(self):
        assert get_module_logger().component == "Params"
        assert get_module_logger("camparams.cli").component == "cli"

    def test_prefix_added_once(self, caplog):
        logger = get_module_logger("Test")
        with caplog.at_level(logging.INFO, logger="camparams"):
            logger.info("loaded %d groups", 2)
            logger.info("[Test] already tagged")
        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["[Test] loaded 2 groups", "[Test] already tagged"]

    def test_bad_format_args_do_not_raise(self, caplog):
        logger = get_module_logger("Test")
        with caplog.at_level(logging.WARNING, logger="camparams"):
            logger.warning("value %d", "not-a-number")
        assert caplog.records[0].getMessage() == "[Test] value %d | args=not-a-number"

    def test_disabled_level_skipped(self, caplog):
        logger = get_module_logger("Quiet")
        with caplog.at_level(logging.WARNING, logger="camparams"):
            logger.debug("hidden")
        assert caplog.records == []

    def test_delegates_to_wrapped_logger(self):
        logger = get_module_logger("Delegate")
        assert isinstance(logger, StructuredLogger)
        assert logger.getEffectiveLevel() == logging.getLogger("camparams.Delegate").getEffectiveLevel()


class TestConfigureLogging:

    def test_console_handler_on_stderr(self, restore_root_logging):
        configure_logging("info")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_log_file(self, tmp_path, restore_root_logging):
        log_path = tmp_path / "logs" / "camparams.log"
        configure_logging("debug", log_file=log_path)

        get_module_logger("FileTest").debug("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers)
        assert "[FileTest] written to file" in log_path.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, restore_root_logging):
        configure_logging("debug")
        configure_logging("error")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.ERROR

    def test_unknown_level(self, restore_root_logging):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("verbose")
