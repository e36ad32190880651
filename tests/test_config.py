import importlib
import os
import unittest
from unittest.mock import patch

import torcheck.config as config


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.addCleanup(importlib.reload, config)

    def _reload(self, env: dict[str, str]):
        with patch.dict(os.environ, env, clear=False), patch(
            "dotenv.load_dotenv", return_value=False
        ):
            return importlib.reload(config).settings

    def test_defaults_point_at_tor_project(self) -> None:
        with patch.dict(os.environ):
            for key in ("TORCHECK_PAGE_URL", "TORCHECK_API_URL", "TORCHECK_LOG_PAGE_LINES"):
                os.environ.pop(key, None)
            settings = self._reload({})

        self.assertEqual(
            settings.TORCHECK_PAGE_URL, "https://check.torproject.org/?TorButton=True"
        )
        self.assertEqual(settings.TORCHECK_API_URL, "https://check.torproject.org/api/ip")
        self.assertFalse(settings.TORCHECK_LOG_PAGE_LINES)

    def test_environment_overrides(self) -> None:
        settings = self._reload(
            {
                "TORCHECK_PAGE_URL": "http://check.local/page",
                "TORCHECK_API_URL": "http://check.local/api/ip",
                "TORCHECK_LOG_PAGE_LINES": "Yes",
            }
        )

        self.assertEqual(settings.TORCHECK_PAGE_URL, "http://check.local/page")
        self.assertEqual(settings.TORCHECK_API_URL, "http://check.local/api/ip")
        self.assertTrue(settings.TORCHECK_LOG_PAGE_LINES)

    def test_log_flag_is_false_for_unknown_values(self) -> None:
        settings = self._reload({"TORCHECK_LOG_PAGE_LINES": "maybe"})
        self.assertFalse(settings.TORCHECK_LOG_PAGE_LINES)


if __name__ == "__main__":
    unittest.main()
