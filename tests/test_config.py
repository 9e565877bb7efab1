import unittest

from pydantic import ValidationError

from pngsize.config import ServiceConfig


class TestServiceConfig(unittest.TestCase):
    def test_defaults(self):
        config = ServiceConfig()
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(config.port, 7878)
        self.assertEqual(config.header_bytes, 24)
        self.assertIsNone(config.log_file)

    def test_rejects_invalid_values(self):
        for kwargs in ({"port": 0}, {"fetch_timeout": 0}, {"header_bytes": 8}, {"max_reads": 0}):
            with self.subTest(**kwargs):
                with self.assertRaises(ValidationError):
                    ServiceConfig(**kwargs)


if __name__ == "__main__":
    unittest.main()
