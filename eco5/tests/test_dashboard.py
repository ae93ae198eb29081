import unittest

from eco5.tests.support import ApiTestCase


class DashboardTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_id, self.headers = self.login_as()
        self.url = f"/api/dashboard/{self.user_id}"

    def test_new_user_has_zeroed_dashboard(self):
        response = self.client.get(self.url, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "user_id": self.user_id,
                "carbon_footprint": 0.0,
                "historical_data": None,
                "daily_tips": None,
                "challenges": None,
            },
        )

    def test_partial_update(self):
        response = self.client.patch(
            self.url,
            json={"carbon_footprint": 12.5, "daily_tips": "Walk more"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["carbon_footprint"], 12.5)
        self.assertEqual(body["daily_tips"], "Walk more")
        self.assertIsNone(body["challenges"])

        response = self.client.patch(
            self.url, json={"challenges": "No car week"}, headers=self.headers
        )
        body = response.json()
        self.assertEqual(body["carbon_footprint"], 12.5)
        self.assertEqual(body["challenges"], "No car week")
        self.assertEqual(self.client.get(self.url, headers=self.headers).json(), body)

    def test_nullable_text_can_be_cleared(self):
        self.client.patch(self.url, json={"daily_tips": "tip"}, headers=self.headers)
        response = self.client.patch(
            self.url, json={"daily_tips": None}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["daily_tips"])

    def test_update_without_known_fields(self):
        for payload in ({}, {"bogus": 1}):
            with self.subTest(payload=payload):
                response = self.client.patch(
                    self.url, json=payload, headers=self.headers
                )
                self.assertErrorEnvelope(response, 400, "NO_UPDATE_FIELDS")

    def test_invalid_footprint(self):
        for payload in ({"carbon_footprint": None}, {"carbon_footprint": "lots"}):
            with self.subTest(payload=payload):
                response = self.client.patch(
                    self.url, json=payload, headers=self.headers
                )
                self.assertErrorEnvelope(response, 400, "VALIDATION_ERROR")
        self.assertEqual(self.db.get_dashboard(self.user_id).carbon_footprint, 0.0)

    def test_non_finite_footprint_rejected(self):
        self.client.patch(
            self.url, json={"carbon_footprint": 3.5}, headers=self.headers
        )
        headers = {**self.headers, "Content-Type": "application/json"}
        for literal in ("NaN", "Infinity", "-Infinity"):
            with self.subTest(literal=literal):
                response = self.client.patch(
                    self.url,
                    content='{"carbon_footprint": ' + literal + "}",
                    headers=headers,
                )
                self.assertErrorEnvelope(response, 400, "VALIDATION_ERROR")
        stored = self.client.get(self.url, headers=self.headers).json()
        self.assertEqual(stored["carbon_footprint"], 3.5)

    def test_unknown_dashboard(self):
        response = self.client.get("/api/dashboard/missing", headers=self.headers)
        self.assertErrorEnvelope(response, 404, "DASHBOARD_NOT_FOUND")
        response = self.client.patch(
            "/api/dashboard/missing",
            json={"carbon_footprint": 1},
            headers=self.headers,
        )
        self.assertErrorEnvelope(response, 404, "DASHBOARD_NOT_FOUND")


class ImpactCalculatorTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_id, self.headers = self.login_as()
        self.url = f"/api/impact-calculator/{self.user_id}"

    def test_first_read_creates_empty_calculator(self):
        first = self.client.get(self.url, headers=self.headers)
        self.assertEqual(first.status_code, 200)
        body = first.json()
        self.assertEqual(body["user_id"], self.user_id)
        self.assertIsNone(body["travel_habits"])
        self.assertIsNone(body["energy_consumption"])
        self.assertIsNone(body["waste_management"])

        second = self.client.get(self.url, headers=self.headers)
        self.assertEqual(second.json()["id"], body["id"])

    def test_update_before_first_read(self):
        response = self.client.patch(
            self.url, json={"travel_habits": "bike"}, headers=self.headers
        )
        self.assertErrorEnvelope(response, 404, "CALCULATOR_NOT_FOUND")

    def test_update_after_first_read(self):
        self.client.get(self.url, headers=self.headers)
        response = self.client.patch(
            self.url,
            json={"travel_habits": "bike", "waste_management": "compost"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["travel_habits"], "bike")
        self.assertEqual(response.json()["waste_management"], "compost")
        self.assertIsNone(response.json()["energy_consumption"])

    def test_empty_update(self):
        self.client.get(self.url, headers=self.headers)
        response = self.client.patch(self.url, json={}, headers=self.headers)
        self.assertErrorEnvelope(response, 400, "NO_UPDATE_FIELDS")

    def test_unknown_user(self):
        response = self.client.get(
            "/api/impact-calculator/missing", headers=self.headers
        )
        self.assertErrorEnvelope(response, 404, "USER_NOT_FOUND")


if __name__ == "__main__":
    unittest.main()
