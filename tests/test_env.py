import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from chat_relay.core.config import load_settings  # noqa: E402
from chat_relay.core.env import load_env, required_keys  # noqa: E402
from chat_relay.core.exceptions import ConfigError, MissingEnvVarsError  # noqa: E402


class LoadEnvTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        self.manifest = self.root / ".env.example"
        self.manifest.write_text("# required\nOPENAI_EMAIL=\nOPENAI_PASSWORD=\n", encoding="utf-8")
        self.env_file = self.root / ".env"

    def test_required_keys_reads_manifest(self):
        self.assertEqual(required_keys(self.manifest), ["OPENAI_EMAIL", "OPENAI_PASSWORD"])
        self.assertEqual(required_keys(self.root / "absent"), [])

    def test_env_file_values_satisfy_manifest(self):
        self.env_file.write_text("OPENAI_EMAIL=a@example.com\nOPENAI_PASSWORD=secret\n", encoding="utf-8")
        with patch.dict(os.environ, {}, clear=True):
            load_env(self.env_file, self.manifest)
            self.assertEqual(os.environ["OPENAI_EMAIL"], "a@example.com")
            self.assertEqual(os.environ["OPENAI_PASSWORD"], "secret")

    def test_process_environment_is_not_overridden(self):
        self.env_file.write_text("OPENAI_EMAIL=file@example.com\nOPENAI_PASSWORD=secret\n", encoding="utf-8")
        with patch.dict(os.environ, {"OPENAI_EMAIL": "proc@example.com"}, clear=True):
            load_env(self.env_file, self.manifest)
            self.assertEqual(os.environ["OPENAI_EMAIL"], "proc@example.com")

    def test_missing_keys_are_listed(self):
        self.env_file.write_text("OPENAI_EMAIL=a@example.com\nOPENAI_PASSWORD=\n", encoding="utf-8")
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(MissingEnvVarsError) as ctx:
                load_env(self.env_file, self.manifest)
        self.assertEqual(ctx.exception.missing, ["OPENAI_PASSWORD"])
        self.assertIsInstance(ctx.exception, ConfigError)
        self.assertIn("OPENAI_PASSWORD", str(ctx.exception))

    def test_indexed_credentials_satisfy_manifest_credential_keys(self):
        with patch.dict(os.environ, {"OPENAI_EMAIL_3": "three@example.com"}, clear=True):
            with self.assertRaises(MissingEnvVarsError) as ctx:
                load_env(self.env_file, self.manifest, hostname="worker-3")
        self.assertEqual(ctx.exception.missing, ["OPENAI_PASSWORD"])

        with patch.dict(
            os.environ, {"OPENAI_EMAIL_3": "three@example.com", "OPENAI_PASSWORD_3": "pw3"}, clear=True
        ):
            load_env(self.env_file, self.manifest, hostname="worker-3")

    def test_missing_manifest_disables_check(self):
        with patch.dict(os.environ, {}, clear=True):
            load_env(self.root / "no.env", self.root / "no.example")


if __name__ == "__main__":
    unittest.main()


class ShippedManifestTests(unittest.TestCase):
    def test_indexed_only_host_starts_with_shipped_manifest(self):
        manifest = PROJECT_ROOT / ".env.example"
        self.assertIn("OPENAI_EMAIL", required_keys(manifest))

        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text("", encoding="utf-8")
            indexed = {"OPENAI_EMAIL_3": "three@example.com", "OPENAI_PASSWORD_3": "pw3"}
            with patch.dict(os.environ, indexed, clear=True):
                load_env(env_file, manifest, hostname="worker-3")
                settings = load_settings(hostname="worker-3")

        self.assertEqual(settings.instance_name, "worker-3")
        self.assertEqual(settings.credentials.email, "three@example.com")
        self.assertEqual(settings.credentials.password, "pw3")

    def test_instance_name_variable_selects_index(self):
        manifest = PROJECT_ROOT / ".env.example"
        env = {"INSTANCE_NAME": "chat-5", "OPENAI_EMAIL_5": "five@example.com", "OPENAI_PASSWORD_5": "pw5"}
        with patch.dict(os.environ, env, clear=True):
            load_env(PROJECT_ROOT / "no-such.env", manifest, hostname="ignored-1")
