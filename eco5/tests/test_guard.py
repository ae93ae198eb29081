import unittest
from datetime import datetime, timedelta, timezone

import jwt

from eco5.auth import decode_token, issue_token
from eco5.errors import AuthTokenInvalid
from eco5.tests.support import TEST_SECRET, ApiTestCase, make_settings


class DecodeTokenTests(unittest.TestCase):
    def setUp(self):
        self.settings = make_settings()

    def test_round_trip(self):
        token = issue_token("user-1", "a@example.com", self.settings)
        claims = decode_token(token, self.settings)
        self.assertEqual(claims["user_id"], "user-1")
        self.assertEqual(claims["email"], "a@example.com")

    def test_missing_user_id_claim(self):
        token = jwt.encode(
            {
                "email": "a@example.com",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(AuthTokenInvalid):
            decode_token(token, self.settings)

    def test_expired_token(self):
        token = jwt.encode(
            {
                "user_id": "user-1",
                "exp": datetime.now(timezone.utc) - timedelta(seconds=5),
            },
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(AuthTokenInvalid) as ctx:
            decode_token(token, self.settings)
        self.assertEqual(ctx.exception.message, "Token has expired")


class GuardTests(ApiTestCase):
    def test_missing_header(self):
        response = self.client.get("/api/events")
        self.assertErrorEnvelope(response, 401, "AUTH_TOKEN_MISSING")

    def test_non_bearer_scheme_counts_as_missing(self):
        response = self.client.get(
            "/api/events", headers={"Authorization": "Basic dXNlcjpwYXNz"}
        )
        self.assertErrorEnvelope(response, 401, "AUTH_TOKEN_MISSING")

    def test_malformed_token(self):
        response = self.client.get("/api/events", headers=self.auth_headers("nope"))
        self.assertErrorEnvelope(response, 401, "AUTH_TOKEN_INVALID")

    def test_forged_signature(self):
        user = self.register()
        forged = jwt.encode(
            {
                "user_id": user["id"],
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            "someone-elses-secret",
            algorithm="HS256",
        )
        response = self.client.get("/api/events", headers=self.auth_headers(forged))
        self.assertErrorEnvelope(response, 401, "AUTH_TOKEN_INVALID")

    def test_expired_token(self):
        user = self.register()
        expired = jwt.encode(
            {
                "user_id": user["id"],
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            TEST_SECRET,
            algorithm="HS256",
        )
        response = self.client.get("/api/events", headers=self.auth_headers(expired))
        self.assertErrorEnvelope(response, 401, "AUTH_TOKEN_INVALID")

    def test_token_for_removed_user(self):
        token = issue_token("ghost", "ghost@example.com", self.settings)
        response = self.client.get("/api/events", headers=self.auth_headers(token))
        self.assertErrorEnvelope(response, 401, "AUTH_USER_NOT_FOUND")

    def test_valid_token_reaches_handler(self):
        user = self.register()
        response = self.client.get(
            "/api/events", headers=self.auth_headers(user["token"])
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_every_protected_router_is_guarded(self):
        paths = [
            "/api/users/search",
            "/api/users/someone",
            "/api/dashboard/someone",
            "/api/impact-calculator/someone",
            "/api/community-forum",
            "/api/events",
            "/api/resource-library",
            "/api/alerts/someone",
        ]
        for path in paths:
            with self.subTest(path=path):
                self.assertErrorEnvelope(
                    self.client.get(path), 401, "AUTH_TOKEN_MISSING"
                )


if __name__ == "__main__":
    unittest.main()
