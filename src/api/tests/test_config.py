"""Unit tests for Settings loading."""

import dataclasses
import os
import unittest
from unittest.mock import patch

from api.config import DEV_JWT_SECRET, Settings, load_settings


@patch('api.config.load_dotenv', lambda: None)
class TestLoadSettings(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()

        self.assertEqual(settings.jwt_secret, DEV_JWT_SECRET)
        self.assertEqual(settings.jwt_expiration_days, 7)
        self.assertEqual(settings.port, 5000)
        self.assertIsNone(settings.mongo_url)
        self.assertIsNone(settings.google_client_id)
        self.assertEqual(settings.cors_origins, ('http://localhost:3000',))

    @patch.dict(os.environ, {
        'JWT_SECRET': 's3cret',
        'MONGO_URI': 'mongodb://db:27017',
        'MONGODB_DATABASE': 'todos',
        'GOOGLE_CLIENT_ID': 'client.apps.googleusercontent.com',
        'CORS_ORIGINS': 'https://a.example.com, https://b.example.com',
        'PORT': '8080',
    }, clear=True)
    def test_reads_environment(self):
        settings = load_settings()

        self.assertEqual(settings.jwt_secret, 's3cret')
        self.assertEqual(settings.mongo_url, 'mongodb://db:27017')
        self.assertEqual(settings.database_name, 'todos')
        self.assertEqual(settings.google_client_id, 'client.apps.googleusercontent.com')
        self.assertEqual(settings.cors_origins, ('https://a.example.com', 'https://b.example.com'))
        self.assertEqual(settings.port, 8080)

    @patch.dict(os.environ, {}, clear=True)
    def test_warns_on_dev_secret(self):
        with self.assertLogs('api.config', level='WARNING'):
            load_settings()


class TestSettings(unittest.TestCase):

    def test_settings_are_immutable(self):
        settings = Settings()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            settings.jwt_secret = 'changed'


if __name__ == '__main__':
    unittest.main()
