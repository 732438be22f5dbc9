import logging
import unittest

from lifostack import config, init
from tests.mock.mock_logger import MockLogger


class TestConfig(unittest.TestCase):
    def tearDown(self):
        init()

    def test_init_with_logger(self):
        logger = MockLogger()
        init(logger)
        self.assertIs(logger, config.LOG)

    def test_init_defaults_to_logging(self):
        init(MockLogger())
        init()
        self.assertIs(logging, config.LOG)

    def test_defaults(self):
        self.assertEqual('default', config.DEFAULT_STACK_NAME)
        self.assertIsInstance(config.RESET_ON_FORK, bool)
