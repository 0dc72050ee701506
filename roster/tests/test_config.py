import os
import unittest
from unittest.mock import patch

from roster.config import Settings
from roster.db import InMemoryTeamStore
from roster.dependencies import build_team_store


class SettingsTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings(_env_file=None)
        self.assertEqual(settings.api_prefix, "/api")
        self.assertEqual(settings.port, 8000)
        self.assertIsNone(settings.mongodb_url)
        self.assertFalse(settings.use_in_memory_backends)

    @patch.dict(
        os.environ,
        {
            "PORT": "9001",
            "MONGODB_URL": "mongodb://db:27017",
            "ROSTER_USE_IN_MEMORY_BACKENDS": "true",
        },
        clear=True,
    )
    def test_environment_overrides(self):
        settings = Settings(_env_file=None)
        self.assertEqual(settings.port, 9001)
        self.assertEqual(settings.mongodb_url, "mongodb://db:27017")
        self.assertTrue(settings.use_in_memory_backends)


class BuildTeamStoreTests(unittest.TestCase):
    def test_in_memory_without_url(self):
        store = build_team_store(Settings(_env_file=None, mongodb_url=None))
        self.assertIsInstance(store, InMemoryTeamStore)

    def test_in_memory_when_requested(self):
        settings = Settings(
            _env_file=None,
            mongodb_url="mongodb://db:27017",
            use_in_memory_backends=True,
        )
        self.assertIsInstance(build_team_store(settings), InMemoryTeamStore)

    @patch.dict(os.environ, {}, clear=True)
    @patch("roster.dependencies.MongoTeamStore")
    def test_mongo_when_url_set(self, mock_store):
        settings = Settings(
            _env_file=None,
            mongodb_url="mongodb://db:27017",
            mongodb_database="league",
            use_in_memory_backends=False,
        )
        store = build_team_store(settings)
        self.assertIs(store, mock_store.return_value)
        mock_store.assert_called_once_with(
            "mongodb://db:27017",
            database="league",
            collection="teams",
            timeout_ms=5000,
        )


if __name__ == "__main__":
    unittest.main()
