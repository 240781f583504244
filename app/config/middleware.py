"""
Access logging for the listing and report pages.
"""

import logging
import time

logger = logging.getLogger("access")


class RequestLoggingMiddleware:
    """
    Writes one record to the ``access`` logger per request.

    Besides the visitor, path, method, status and timing, records carry the
    resolved view name and the ``language`` route segment, so listing 404s
    can be grouped per language. Server errors are logged at WARNING.
    """

    SKIP_PATH_PREFIXES = (
        "/static/",
        "/favicon.ico",
    )

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(self.SKIP_PATH_PREFIXES):
            return self.get_response(request)

        started = time.perf_counter()
        response = self.get_response(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, "HTTP Request", extra=self.build_record(request, response, elapsed_ms))
        return response

    def build_record(self, request, response, elapsed_ms):
        match = getattr(request, "resolver_match", None)
        user = getattr(request, "user", None)
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")

        return {
            "user": user.get_username() if user is not None and user.is_authenticated else "anonymous",
            "path": request.path,
            "method": request.method,
            "status_code": response.status_code,
            "response_time_ms": elapsed_ms,
            "view": match.view_name if match else None,
            "language": match.kwargs.get("language") if match else None,
            "query_string": request.META.get("QUERY_STRING", ""),
            "user_agent": request.META.get("HTTP_USER_AGENT", ""),
            # first hop of X-Forwarded-For when behind a proxy
            "ip_address": forwarded.split(",")[0].strip() if forwarded else request.META.get("REMOTE_ADDR", ""),
        }
