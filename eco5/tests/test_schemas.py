import os
import unittest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

from pydantic import ValidationError

from eco5.config import Settings
from eco5.schemas import (
    EventCreatePayload,
    RegisterPayload,
    UserUpdatePayload,
)
from eco5.timestamps import format_timestamp


class TimestampTests(unittest.TestCase):
    def test_format_timestamp(self):
        self.assertEqual(format_timestamp(date(2024, 1, 2)), "2024-01-02T00:00:00.000Z")
        self.assertEqual(
            format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678999)),
            "2024-01-02T03:04:05.678Z",
        )
        plus_two = timezone(timedelta(hours=2))
        self.assertEqual(
            format_timestamp(datetime(2024, 1, 2, 1, 0, tzinfo=plus_two)),
            "2024-01-01T23:00:00.000Z",
        )

    def test_years_below_1000_are_zero_padded(self):
        self.assertEqual(format_timestamp(date(999, 1, 1)), "0999-01-01T00:00:00.000Z")


class PayloadTests(unittest.TestCase):
    def test_unknown_keys_dropped(self):
        payload = RegisterPayload.model_validate(
            {"email": "a@example.com", "name": " Ann ", "password": "x", "admin": True}
        )
        self.assertEqual(payload.name, "Ann")
        self.assertNotIn("admin", payload.model_dump())

    def test_blank_name_rejected(self):
        with self.assertRaises(ValidationError):
            RegisterPayload.model_validate(
                {"email": "a@example.com", "name": "   ", "password": "x"}
            )

    def test_supplied_fields_are_only_those_sent(self):
        payload = UserUpdatePayload.model_validate({"name": "Ann"})
        self.assertEqual(payload.supplied_fields(), {"name": "Ann"})

    def test_null_on_required_column_rejected(self):
        with self.assertRaises(ValidationError):
            UserUpdatePayload.model_validate({"email": None})

    def test_event_date_normalized(self):
        payload = EventCreatePayload.model_validate(
            {"event_name": "Cleanup", "event_date": "2024-05-01T12:30:00-04:00"}
        )
        self.assertEqual(payload.event_date, "2024-05-01T16:30:00.000Z")

        with self.assertRaises(ValidationError):
            EventCreatePayload.model_validate(
                {"event_name": "Cleanup", "event_date": "whenever"}
            )


class SettingsTests(unittest.TestCase):
    def test_database_url_wins(self):
        settings = Settings(
            _env_file=None, database_url="sqlite:///eco5.db", pghost="db"
        )
        self.assertEqual(settings.resolved_database_url(), "sqlite:///eco5.db")

    def test_postgres_url_built_from_parts(self):
        settings = Settings(
            _env_file=None,
            database_url=None,
            pghost="db",
            pguser="eco",
            pgpassword="pw",
            pgdatabase="eco5",
        )
        self.assertEqual(
            settings.resolved_database_url(),
            "postgresql+psycopg2://eco:pw@db:5432/eco5",
        )

    def test_nothing_configured_means_in_memory(self):
        settings = Settings(_env_file=None, database_url=None, pghost=None)
        self.assertIsNone(settings.resolved_database_url())

    @patch.dict(os.environ, {"ECO5_USE_IN_MEMORY_BACKENDS": "1"})
    def test_in_memory_toggle(self):
        settings = Settings(_env_file=None, database_url="postgresql://x/y")
        self.assertTrue(settings.use_in_memory_backends)
        self.assertIsNone(settings.resolved_database_url())

    def test_defaults(self):
        settings = Settings(_env_file=None)
        self.assertEqual(settings.api_prefix, "/api")
        self.assertEqual(settings.jwt_expire_days, 7)
        self.assertFalse(settings.is_development)


if __name__ == "__main__":
    unittest.main()
