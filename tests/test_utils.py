"""Tests for configuration and logging helpers."""

import json
import logging
import os
import tempfile
import unittest

from tree_selector.utils.config import DEFAULT_CONFIG, Config
from tree_selector.utils.logging import LogFormatter, PerformanceLogger, setup_logging


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "sub", "config.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_defaults_when_missing(self):
        config = Config(self.path)
        assert config.get_all() == DEFAULT_CONFIG
        assert config.get("parsing.default_language") == "javascript"
        assert config.get("output.missing", "fallback") == "fallback"
        assert not os.path.exists(self.path)

    def test_set_save_load(self):
        config = Config(self.path)
        config.set("output.format", "json")
        config.set("extra.nested.value", 3)
        config.save()

        reloaded = Config(self.path)
        assert reloaded.get("output.format") == "json"
        assert reloaded.get("extra.nested.value") == 3

    def test_partial_file_keeps_defaults(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w") as f:
            json.dump({"query": {"verbose": True}}, f)

        config = Config(self.path)
        assert config.get("query.verbose") is True
        assert config.get("logging.console_level") == "WARNING"

    def test_invalid_file_falls_back(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w") as f:
            f.write("{not json")

        with self.assertLogs("tree_selector.utils.config", "ERROR"):
            config = Config(self.path)
        assert config.get_all() == DEFAULT_CONFIG

    def test_remove(self):
        config = Config(self.path)
        assert config.remove("output.format")
        assert config.get("output.format") is None
        assert not config.remove("output.format")
        assert not config.remove("nothing.here")

    def test_get_all_is_a_copy(self):
        config = Config(self.path)
        config.get_all()["query"]["verbose"] = True
        assert config.get("query.verbose") is False


class TestLogging(unittest.TestCase):

    def test_component_logger(self):
        logger = setup_logging(component="tests_component", colored=False)
        assert logger.name == "tree_selector.tests_component"
        assert len(logger.handlers) == 1
        assert setup_logging(component="tests_component") is logger
        assert len(logger.handlers) == 1

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = os.path.join(tmpdir, "logs", "run.log")
            logger = setup_logging(log_file=log_file, component="tests_file", colored=False)
            try:
                logger.debug("written to file")
                for handler in logger.handlers:
                    handler.flush()
                with open(log_file) as f:
                    assert "written to file" in f.read()
            finally:
                for handler in list(logger.handlers):
                    handler.close()
                    logger.removeHandler(handler)

    def test_colored_formatter(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        formatter = LogFormatter(colored=True, fmt="%(levelname)s %(message)s")
        formatter.colored = True
        assert formatter.format(record) == "\033[33mWARNING\033[0m careful"
        plain = LogFormatter(colored=False, fmt="%(levelname)s %(message)s")
        assert plain.format(record) == "WARNING careful"

    def test_performance_logger(self):
        logger = logging.getLogger("tree_selector.tests_perf")
        timer = PerformanceLogger(logger, "query")
        timer.start("parse")
        with self.assertLogs(logger, "DEBUG") as cm:
            assert timer.end("parse") >= 0
        assert "query parse took" in cm.output[0]
        with self.assertLogs(logger, "WARNING"):
            assert timer.end("parse") == 0.0


if __name__ == "__main__":
    unittest.main()
