"""
Django middleware for binding request context to structlog.

This middleware automatically adds request_id, method, path and user_id to
all log entries for the duration of a request.
"""

import structlog
from uuid import uuid4


class StructlogRequestContextMiddleware:
    """
    Middleware to bind request context to structlog.

    Every log entry written while the request is handled carries the same
    request_id, so an inquiry submission can be traced from rate limiting
    through persistence to notification scheduling.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = uuid4().hex
        user = getattr(request, 'user', None)

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.path,
            user_id=user.id if user is not None and user.is_authenticated else None,
        )

        try:
            response = self.get_response(request)
            response['X-Request-ID'] = request_id
            return response
        finally:
            # Clear context after request completes
            structlog.contextvars.clear_contextvars()
