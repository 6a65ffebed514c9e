import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from formcheck.core import config as config_module
from formcheck.core.config import Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        self.user_config_path = Path(self.tmp_dir.name) / "user" / "config.toml"
        patcher = patch.object(config_module, "USER_CONFIG_PATH", self.user_config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        env_patcher = patch.dict(os.environ, {}, clear=False)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        for var in Config.ENV_MAPPING:
            os.environ.pop(var, None)

    def _write_config(self, content):
        path = Path(self.tmp_dir.name) / "custom.toml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_defaults(self):
        config = Config(load_files=False)
        self.assertEqual(config.get("output"), "table")
        self.assertFalse(config.get("verbose"))
        self.assertEqual(config.get("missing.key", "fallback"), "fallback")

    def test_defaults_are_not_shared(self):
        first = Config(load_files=False)
        first.set("validators.Text.required", True)
        first.get("disable_validators").append("Email")
        second = Config(load_files=False)
        self.assertEqual(second.get("validators"), {})
        self.assertEqual(second.get("disable_validators"), [])

    def test_file_config_is_merged(self):
        path = self._write_config(
            'output = "json"\n'
            '[validators.Password]\n'
            'min_length = 12\n'
            'enabled = true\n'
        )
        config = Config(config_path=path)
        self.assertEqual(config.get("output"), "json")
        self.assertEqual(config.validator_options("Password"), {"min_length": 12})
        self.assertEqual(config.validator_options("Email"), {})

    def test_unreadable_file_keeps_defaults(self):
        path = self._write_config("output = [")
        with patch("sys.stderr"):
            config = Config(config_path=path)
        self.assertEqual(config.get("output"), "table")

    def test_env_overrides(self):
        os.environ["FORMCHECK_VERBOSE"] = "yes"
        os.environ["FORMCHECK_OUTPUT"] = "json"
        os.environ["FORMCHECK_DISABLE_VALIDATORS"] = "Email, Number,"
        config = Config(load_files=False)
        self.assertTrue(config.get("verbose"))
        self.assertEqual(config.get("output"), "json")
        self.assertEqual(config.get("disable_validators"), ["Email", "Number"])

    def test_is_validator_enabled(self):
        config = Config(load_files=False)
        self.assertTrue(config.is_validator_enabled("Email"))

        config.set("validators.Email.enabled", False)
        self.assertFalse(config.is_validator_enabled("Email"))

        config.set("enable_validators", ["Text"])
        self.assertTrue(config.is_validator_enabled("Text"))
        self.assertFalse(config.is_validator_enabled("Password"))

        config.set("enable_validators", [])
        config.set("disable_validators", ["Password"])
        self.assertFalse(config.is_validator_enabled("Password"))
        self.assertTrue(config.is_validator_enabled("Text"))

    def test_set_and_reset_user_config(self):
        Config.set_user_value("validators.Text.max_length", 50)
        self.assertTrue(self.user_config_path.exists())

        reloaded = Config()
        self.assertEqual(reloaded.get("validators.Text.max_length"), 50)
        self.assertEqual(reloaded.get("output"), "table")

        self.assertTrue(Config.reset_user_config())
        self.assertFalse(self.user_config_path.exists())
        self.assertFalse(Config.reset_user_config())

    def test_set_user_value_keeps_existing_user_settings(self):
        self.user_config_path.parent.mkdir(parents=True)
        self.user_config_path.write_text("[validators.Password]\nmin_length = 12\n", encoding="utf-8")
        Config.set_user_value("validators.Text.max_length", 50)

        with open(self.user_config_path, "rb") as f:
            saved = tomllib.load(f)
        self.assertEqual(saved, {"validators": {"Password": {"min_length": 12}, "Text": {"max_length": 50}}})

    def test_set_user_value_does_not_persist_env_or_defaults(self):
        os.environ["FORMCHECK_OUTPUT"] = "json"
        os.environ["FORMCHECK_DISABLE_VALIDATORS"] = "Email"
        Config.set_user_value("validators.Text.max_length", 50)

        with open(self.user_config_path, "rb") as f:
            saved = tomllib.load(f)
        self.assertEqual(saved, {"validators": {"Text": {"max_length": 50}}})
        self.assertEqual(Config().get("output"), "json")


if __name__ == '__main__':
    unittest.main()
