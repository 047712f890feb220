import logging
import os
import unittest
from unittest.mock import patch

import colorlog

from webforms import settings
from webforms.utils.logger import Logger


class TestLogger(unittest.TestCase):

    def test_single_colored_handler(self):
        Logger("webforms.test.handlers")
        logger = Logger("webforms.test.handlers")
        self.assertEqual(len(logger.logger.handlers), 1)
        self.assertIsInstance(logger.logger.handlers[0].formatter, colorlog.ColoredFormatter)

    def test_explicit_level(self):
        logger = Logger("webforms.test.level", level=logging.DEBUG)
        self.assertEqual(logger.logger.level, logging.DEBUG)

    def test_default_level_from_settings(self):
        with patch.object(settings, 'LOG_LEVEL', logging.ERROR):
            logger = Logger("webforms.test.default")
        self.assertEqual(logger.logger.level, logging.ERROR)

    def test_messages_reach_logger(self):
        logger = Logger("webforms.test.messages", level=logging.DEBUG)
        with self.assertLogs("webforms.test.messages", level="DEBUG") as captured:
            logger.debug("depuração")
            logger.info("informação")
            logger.warning("aviso")
            logger.error("erro")
        self.assertEqual(len(captured.records), 4)


class TestLogLevelSetting(unittest.TestCase):

    def test_read_from_environment(self):
        with patch.dict(os.environ, {'WEBFORMS_LOG_LEVEL': 'debug'}):
            self.assertEqual(settings._read_log_level(), logging.DEBUG)

    def test_unknown_level_uses_default(self):
        with patch.dict(os.environ, {'WEBFORMS_LOG_LEVEL': 'verbose'}):
            self.assertEqual(settings._read_log_level(), logging.WARNING)

    def test_missing_variable_uses_default(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(settings._read_log_level(logging.INFO), logging.INFO)


if __name__ == '__main__':
    unittest.main()
