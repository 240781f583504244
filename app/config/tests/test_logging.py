"""
Tests for the logging configuration and the access logging middleware.
"""
import logging
from unittest.mock import MagicMock, patch

from django.conf import settings
from django.contrib.auth import get_user_model
from django.test import TestCase, RequestFactory
from django.urls import resolve

from ..middleware import RequestLoggingMiddleware

User = get_user_model()


class LoggingConfigurationTests(TestCase):
    """Tests for the LOGGING dictionary in settings."""

    def test_logs_directory_exists(self):
        self.assertTrue(settings.LOGS_DIR.exists())

    def test_logging_config_has_required_handlers(self):
        handlers = settings.LOGGING["handlers"]
        for handler in ["app_file", "access_file", "error_file", "console"]:
            self.assertIn(handler, handlers, f"Missing handler: {handler}")

    def test_json_formatters_use_python_json_logger(self):
        formatters = settings.LOGGING["formatters"]
        for name in ["json", "json_access"]:
            self.assertIn(name, formatters)
            self.assertTrue(formatters[name]["()"].startswith("pythonjsonlogger"))

    def test_app_loggers_exist(self):
        loggers = settings.LOGGING["loggers"]
        for name in ["access", "accounts", "repositories"]:
            self.assertIn(name, loggers)


class RequestLoggingMiddlewareTests(TestCase):
    """Tests for RequestLoggingMiddleware."""

    def setUp(self):
        self.factory = RequestFactory()
        self.user = User.objects.create_user(username="octocat", password="testpass123")

    def _run(self, request, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        middleware = RequestLoggingMiddleware(lambda req: response)
        with patch("config.middleware.logger") as mock_logger:
            middleware(request)
        return mock_logger

    def _anonymous(self, request):
        request.user = MagicMock()
        request.user.is_authenticated = False
        return request

    def test_logs_authenticated_request(self):
        request = self.factory.get("/repos/python/", {"p": "2"})
        request.user = self.user

        mock_logger = self._run(request)

        mock_logger.log.assert_called_once()
        args, kwargs = mock_logger.log.call_args
        self.assertEqual(args[0], logging.INFO)
        self.assertEqual(args[1], "HTTP Request")
        extra = kwargs["extra"]
        self.assertEqual(extra["user"], "octocat")
        self.assertEqual(extra["path"], "/repos/python/")
        self.assertEqual(extra["method"], "GET")
        self.assertEqual(extra["status_code"], 200)
        self.assertEqual(extra["query_string"], "p=2")

    def test_logs_anonymous_request_and_not_found_status(self):
        request = self._anonymous(self.factory.get("/repos/cobol/"))

        mock_logger = self._run(request, status_code=404)

        extra = mock_logger.log.call_args[1]["extra"]
        self.assertEqual(extra["user"], "anonymous")
        self.assertEqual(extra["status_code"], 404)

    def test_captures_response_time(self):
        request = self._anonymous(self.factory.get("/repos/go/"))

        extra = self._run(request).log.call_args[1]["extra"]

        self.assertIsInstance(extra["response_time_ms"], float)

    def test_extracts_client_ip(self):
        request = self._anonymous(self.factory.get("/repos/go/"))
        request.META["REMOTE_ADDR"] = "192.168.1.1"

        extra = self._run(request).log.call_args[1]["extra"]

        self.assertEqual(extra["ip_address"], "192.168.1.1")

    def test_prefers_first_forwarded_address(self):
        request = self._anonymous(self.factory.get("/repos/go/"))
        request.META["HTTP_X_FORWARDED_FOR"] = "10.0.0.1, 192.168.1.1"

        extra = self._run(request).log.call_args[1]["extra"]

        self.assertEqual(extra["ip_address"], "10.0.0.1")

    def test_skips_static_and_favicon(self):
        for path in ["/static/css/style.css", "/favicon.ico"]:
            request = self._anonymous(self.factory.get(path))
            self._run(request).log.assert_not_called()

    def test_records_view_and_language_segment(self):
        request = self._anonymous(self.factory.get("/repos/rust/"))
        request.resolver_match = resolve("/repos/rust/")

        extra = self._run(request, status_code=404).log.call_args[1]["extra"]

        self.assertEqual(extra["view"], "repositories:list")
        self.assertEqual(extra["language"], "rust")

    def test_unresolved_request_has_no_view(self):
        request = self._anonymous(self.factory.get("/nowhere/"))

        extra = self._run(request, status_code=404).log.call_args[1]["extra"]

        self.assertIsNone(extra["view"])
        self.assertIsNone(extra["language"])

    def test_server_error_logged_as_warning(self):
        request = self._anonymous(self.factory.get("/repos/go/"))

        mock_logger = self._run(request, status_code=500)

        self.assertEqual(mock_logger.log.call_args[0][0], logging.WARNING)
