"""
Tests for the /health/ probe
"""

from unittest.mock import patch

from django.db import OperationalError
from django.test import TestCase
from django.urls import reverse


class HealthCheckTest(TestCase):
    def test_healthy_without_authentication(self):
        response = self.client.get(reverse("health-check"))

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["services"]["database"]["status"], "healthy")
        self.assertEqual(body["services"]["cache"]["status"], "healthy")

    @patch("shiftlog.health.cache")
    def test_cache_failure_reports_503(self, mock_cache):
        mock_cache.set.side_effect = ConnectionError("cache down")

        with self.assertLogs("shiftlog.health", level="ERROR"):
            response = self.client.get(reverse("health-check"))

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["services"]["cache"]["status"], "unhealthy")

    @patch("shiftlog.health.connection")
    def test_database_failure_reports_503(self, mock_connection):
        mock_connection.cursor.side_effect = OperationalError("no database")

        with self.assertLogs("shiftlog.health", level="ERROR"):
            response = self.client.get(reverse("health-check"))

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "unhealthy")
