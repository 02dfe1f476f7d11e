import importlib
import os
import unittest
from unittest.mock import patch


class SettingsTests(unittest.TestCase):
    def _reload(self):
        mod = importlib.import_module("svccheck.config")
        return importlib.reload(mod)

    def tearDown(self) -> None:
        self._reload()

    def test_settings_read_from_environment(self) -> None:
        env = {
            "SVCCHECK_SERVICES": "10.0.0.1:80,10.0.0.2:443",
            "SVCCHECK_TIMEOUT": "3",
            "SVCCHECK_REGISTRY_PATH": "/etc/svccheck/checks.yml",
            "SVCCHECK_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env):
            config = self._reload()

        self.assertEqual(config.settings.SVCCHECK_SERVICES, "10.0.0.1:80,10.0.0.2:443")
        self.assertEqual(config.settings.SVCCHECK_TIMEOUT, 3)
        self.assertEqual(config.settings.SVCCHECK_REGISTRY_PATH, "/etc/svccheck/checks.yml")
        self.assertEqual(config.settings.SVCCHECK_LOG_LEVEL, "debug")

    def test_defaults(self) -> None:
        cleared = {
            k: v for k, v in os.environ.items() if not k.startswith("SVCCHECK_")
        }
        with patch.dict(os.environ, cleared, clear=True), patch(
            "dotenv.load_dotenv", return_value=False
        ):
            config = self._reload()

        self.assertEqual(config.settings.SVCCHECK_SERVICES, "")
        self.assertEqual(config.settings.SVCCHECK_TIMEOUT, 5)
        self.assertIsNone(config.settings.SVCCHECK_REGISTRY_PATH)
        self.assertEqual(config.settings.SVCCHECK_LOG_LEVEL, "warning")


if __name__ == "__main__":
    unittest.main()
