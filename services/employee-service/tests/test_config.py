"""
Tests for employee service configuration.

This module tests environment loading and validation of the settings model.
"""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.config import Settings


class TestDirectoryURL(unittest.TestCase):
    """Test directory URL validation."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_url(self):
        """Should point at the local directory by default."""
        settings = Settings(_env_file=None)
        self.assertEqual(settings.DIRECTORY_API_URL, "http://localhost:8112/api/v1")

    def test_trailing_slash_removed(self):
        """Should strip trailing slashes."""
        settings = Settings(_env_file=None, DIRECTORY_API_URL="https://directory.example.com/api/v1/")
        self.assertEqual(settings.DIRECTORY_API_URL, "https://directory.example.com/api/v1")

    def test_rejects_non_http_scheme(self):
        """Should reject URLs without an http or https scheme."""
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DIRECTORY_API_URL="ftp://directory.example.com")

    def test_rejects_empty_url(self):
        """Should reject an empty URL."""
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DIRECTORY_API_URL="")

    @patch.dict(os.environ, {"DIRECTORY_API_URL": "http://mock-directory:9000/api/v1"})
    def test_read_from_environment(self):
        """Should read the URL from the environment."""
        settings = Settings(_env_file=None)
        self.assertEqual(settings.DIRECTORY_API_URL, "http://mock-directory:9000/api/v1")


class TestTimeoutAndLogging(unittest.TestCase):
    """Test bounded numeric and enumerated settings."""

    def test_timeout_must_be_positive(self):
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, REQUEST_TIMEOUT=0)

    def test_timeout_upper_bound(self):
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, REQUEST_TIMEOUT=120)

    def test_unknown_log_level(self):
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="VERBOSE")

    @patch.dict(os.environ, {"LOG_JSON": "false", "REQUEST_TIMEOUT": "2.5"})
    def test_environment_types_coerced(self):
        settings = Settings(_env_file=None)
        self.assertFalse(settings.LOG_JSON)
        self.assertEqual(settings.REQUEST_TIMEOUT, 2.5)


class TestCorsOrigins(unittest.TestCase):
    """Test CORS origin parsing."""

    def test_single_wildcard(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="*")
        self.assertEqual(settings.cors_origins_list, ["*"])

    def test_comma_separated(self):
        """Should split, trim and drop empty entries."""
        settings = Settings(
            _env_file=None,
            CORS_ORIGINS="http://localhost:3000, https://hr.example.com ,",
        )
        self.assertEqual(
            settings.cors_origins_list,
            ["http://localhost:3000", "https://hr.example.com"],
        )


if __name__ == "__main__":
    unittest.main()
