"""Unit tests for the CORS allow-list."""

import unittest

from fastapi.testclient import TestClient
from api.config import Settings
from api.main import create_app


class TestCors(unittest.TestCase):

    def setUp(self):
        settings = Settings(jwt_secret='test-secret', cors_origins=('https://app.example.com',))
        self.client = TestClient(create_app(settings))

    def test_allowed_origin_gets_cors_headers(self):
        response = self.client.get("/", headers={"Origin": "https://app.example.com"})

        self.assertEqual(response.headers.get("access-control-allow-origin"), "https://app.example.com")

    def test_unknown_origin_gets_no_cors_headers(self):
        response = self.client.get("/", headers={"Origin": "https://evil.example.com"})

        self.assertNotIn("access-control-allow-origin", response.headers)

    def test_request_without_origin_is_allowed(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)

    def test_preflight_from_unknown_origin_rejected(self):
        response = self.client.options(
            "/api/todos",
            headers={
                "Origin": "https://evil.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )

        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
