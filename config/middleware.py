"""
==========================================================
REQUEST LOGGING MIDDLEWARE
==========================================================
Logs every HTTP request with timing and status codes.
Automatically flags slow requests and server errors (5xx).

Output → logs/requests.log + console
"""

import time
import logging

from config.constants.limits import SLOW_REQUEST_MS

logger = logging.getLogger('middleware')


def get_client_ip(request):
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '')


class RequestLoggingMiddleware:
    """Log every request: method, path, client, status, duration."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.time()

        method = request.method
        path = request.get_full_path()
        client = get_client_ip(request) or 'unknown'

        response = self.get_response(request)

        duration_ms = (time.time() - start_time) * 1000
        status = response.status_code

        msg = f"{method} {path} | client={client} | status={status} | {duration_ms:.0f}ms"

        if status >= 500:
            logger.error(f"🔴 SERVER ERROR: {msg}")
        elif status >= 400:
            logger.warning(f"⚠️  CLIENT ERROR: {msg}")
        elif duration_ms > SLOW_REQUEST_MS:
            logger.warning(f"🐌 SLOW REQUEST: {msg}")
        else:
            logger.info(f"✅ {msg}")

        return response

    def process_exception(self, request, exception):
        """Log unhandled exceptions with full context."""
        logger.critical(
            f"💥 UNHANDLED EXCEPTION: {request.method} {request.get_full_path()} "
            f"| client={get_client_ip(request) or 'unknown'} "
            f"| error={type(exception).__name__}: {exception}",
            exc_info=True
        )
        return None  # Let Django handle it
