"""Tests for the JSON log formatter."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter, setup_structured_logging


def make_record(message: str, extra: dict | None = None, exc_info=None) -> logging.LogRecord:
    logger = logging.getLogger("services.lookup_service")
    return logger.makeRecord(
        logger.name, logging.INFO, __file__, 10, message, (), exc_info, extra=extra,
    )


class TestJSONFormatter(unittest.TestCase):

    def test_standard_fields(self):
        data = json.loads(JSONFormatter().format(make_record("Word looked up")))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.lookup_service")
        self.assertEqual(data["message"], "Word looked up")
        self.assertTrue(data["timestamp"].endswith("Z"))
        self.assertNotIn("lineno", data)

    def test_extra_fields_are_included(self):
        record = make_record("Dictionary page not found", extra={"url": "https://ordnet.dk/ddo/ordbog?query=høj"})

        output = JSONFormatter().format(record)

        self.assertIn("høj", output)
        self.assertEqual(json.loads(output)["url"], "https://ordnet.dk/ddo/ordbog?query=høj")

    def test_exception_is_formatted(self):
        try:
            raise ValueError("broken page")
        except ValueError:
            record = make_record("Cannot parse", exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        self.assertIn("ValueError: broken page", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers = self._saved[1]

    def test_installs_json_handler(self):
        setup_structured_logging("DEBUG")

        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0].formatter, JSONFormatter)
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
