"""
Shared fixtures for the API tests: a fresh app wired to an in-memory store.
"""

import tempfile
import unittest

from fastapi.testclient import TestClient

from eco5.app import create_app
from eco5.config import Settings, get_settings
from eco5.db import SqlDbClient
from eco5.dependencies import get_db_client

TEST_SECRET = "test-secret"


def make_settings(**overrides) -> Settings:
    values = {
        "bcrypt_rounds": 4,
        "jwt_secret": TEST_SECRET,
        "database_url": None,
        "pghost": None,
        "environment": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    settings_overrides: dict = {}

    def make_db(self) -> SqlDbClient:
        return SqlDbClient(None)

    def setUp(self):
        self._dist_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self._dist_dir.cleanup)
        overrides = {"frontend_dist_dir": self._dist_dir.name}
        overrides.update(self.settings_overrides)
        self.settings = make_settings(**overrides)

        self.db = self.make_db()
        self.addCleanup(self.db.engine.dispose)

        self.app = create_app(self.settings)
        self.app.dependency_overrides[get_db_client] = lambda: self.db
        self.app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(self.app)

    def register(self, email="john@example.com", name="John", password="secret1"):
        response = self.client.post(
            "/api/auth/register",
            json={"email": email, "name": name, "password": password},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def auth_headers(self, token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    def login_as(self, email="john@example.com", name="John") -> tuple[str, dict]:
        """Register a user and return its id with ready-made auth headers."""
        user = self.register(email=email, name=name)
        return user["id"], self.auth_headers(user["token"])

    def assertErrorEnvelope(self, response, status_code, error_code=None):
        self.assertEqual(response.status_code, status_code, response.text)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertIn("message", body)
        self.assertTrue(body["timestamp"].endswith("Z"))
        if error_code is not None:
            self.assertEqual(body.get("error_code"), error_code)
        return body
