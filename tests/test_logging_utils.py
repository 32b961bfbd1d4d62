import logging
import unittest

from utils import logging_utils
from utils.logging_utils import build_logging_config, get_tagged_logger, mask_headers, mask_secret


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        self.records.append(record)


class TestLoggingUtils(unittest.TestCase):
    def test_build_logging_config_has_expected_handlers_and_filters(self):
        cfg = build_logging_config(job_name="airly_cli")
        self.assertIn("stdout", cfg["handlers"])
        self.assertIn("stderr", cfg["handlers"])
        self.assertEqual(cfg["filters"]["job_name"]["job_name"], "airly_cli")

    def test_get_tagged_logger_injects_tag(self):
        handler = _ListHandler()
        logger = get_tagged_logger("airly.client", tag="airly/client")
        base_logger = logger.logger
        base_logger.setLevel(logging.DEBUG)
        base_logger.addHandler(handler)
        base_logger.propagate = False
        try:
            logger.info("hello")
            self.assertEqual(handler.records[-1].tag, "airly/client")
        finally:
            base_logger.removeHandler(handler)
            base_logger.propagate = True

    def test_get_tagged_logger_default_tag(self):
        logger = get_tagged_logger("airly.cli")
        self.assertEqual(logger.extra["tag"], "cli")

    def test_setup_logging_override_applies_filters(self):
        root = logging.getLogger()
        orig_handlers = root.handlers[:]
        orig_level = root.level
        try:
            logging_utils.setup_logging(level="INFO", job_name="jobtest", override_existing=True)
            self.assertTrue(
                any(
                    any(f.__class__.__name__ == "JobNameFilter" for f in h.filters)
                    for h in root.handlers
                )
            )
        finally:
            root.handlers = orig_handlers
            root.setLevel(orig_level)
            logging_utils._CONFIGURED = False


class TestMasking(unittest.TestCase):
    def test_mask_secret_keeps_last_four(self):
        self.assertEqual(mask_secret("0123456789abcdef"), "************cdef")

    def test_mask_secret_short_and_none(self):
        self.assertEqual(mask_secret("abc"), "***")
        self.assertIsNone(mask_secret(None))

    def test_mask_headers_masks_only_credentials(self):
        headers = {"Accept": "application/json", "apikey": "0123456789abcdef0123456789abcdef"}
        masked = mask_headers(headers)
        self.assertEqual(masked["Accept"], "application/json")
        self.assertEqual(masked["apikey"], "*" * 28 + "cdef")
        self.assertEqual(headers["apikey"], "0123456789abcdef0123456789abcdef")


if __name__ == "__main__":
    unittest.main()
