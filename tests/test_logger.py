import logging
import unittest

from reelword.utils.logger import PROGRESS_LOGGER, configure_logging, get_logger, get_progress_logger


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.INFO)

    def test_loggers_live_under_package(self) -> None:
        self.assertEqual(get_logger().name, "reelword")
        self.assertEqual(get_logger("cli").name, "reelword.cli")
        self.assertEqual(get_logger("reelword.engine.search").name, "reelword.engine.search")
        self.assertEqual(get_progress_logger().name, PROGRESS_LOGGER)

    def test_progress_can_be_shown_without_debug_elsewhere(self) -> None:
        configure_logging(logging.WARNING, show_progress=True)
        self.assertTrue(get_progress_logger().isEnabledFor(logging.DEBUG))
        self.assertFalse(get_logger("engine.search").isEnabledFor(logging.INFO))

        configure_logging(logging.WARNING)
        self.assertFalse(get_progress_logger().isEnabledFor(logging.DEBUG))

        configure_logging(logging.DEBUG)
        self.assertTrue(get_progress_logger().isEnabledFor(logging.DEBUG))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
