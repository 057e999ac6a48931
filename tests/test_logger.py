import io
import logging
import unittest

from crossweave.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_resolve_level_accepts_names_and_numbers(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        self.assertEqual(resolve_level("nonsense"), logging.INFO)

    def test_configure_logging_formats_records(self) -> None:
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        get_logger("crossweave.test").info("placed %s words", 3)
        line = stream.getvalue().strip()
        self.assertIn("| INFO    | crossweave.test | placed 3 words", line)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
