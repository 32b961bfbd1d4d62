import os
import unittest

from airly.config import Settings


class TestConfig(unittest.TestCase):
    def test_settings_defaults(self):
        previous = {k: os.environ.pop(k) for k in list(os.environ) if k.startswith("AIRLY_")}
        try:
            s = Settings()
            self.assertIsNone(s.api_key)
            self.assertEqual(s.base_url, "https://airapi.airly.eu/v2/")
            self.assertEqual(s.language, "en")
            self.assertIsNone(s.request_timeout_seconds)
        finally:
            os.environ.update(previous)

    def test_settings_env_override(self):
        keys = ("AIRLY_API_KEY", "AIRLY_REQUEST_TIMEOUT_SECONDS")
        previous = {k: os.environ.get(k) for k in keys}
        try:
            os.environ["AIRLY_API_KEY"] = "k" * 32
            os.environ["AIRLY_REQUEST_TIMEOUT_SECONDS"] = "4"
            s = Settings()
            self.assertEqual(s.api_key, "k" * 32)
            self.assertEqual(s.request_timeout_seconds, 4.0)
        finally:
            for k, v in previous.items():
                if v is None:
                    os.environ.pop(k, None)
                else:
                    os.environ[k] = v

    def test_base_url_gets_single_trailing_slash(self):
        self.assertEqual(Settings(base_url="http://example.com/v2").base_url, "http://example.com/v2/")
        self.assertEqual(Settings(base_url="http://example.com/v2//").base_url, "http://example.com/v2/")


if __name__ == "__main__":
    unittest.main()
