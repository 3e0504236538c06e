"""
Exception handler for Django REST Framework.

This module provides a custom exception handler that converts our custom
exceptions, and DRF's own, to the ``{"success": false, "error": ...}``
envelope used by every endpoint.
"""

import structlog
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import exceptions as drf_exceptions, status
from .exceptions import BaseAPIException

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = 'An error occurred while processing your request.'


def custom_exception_handler(exc, context):
    """
    Custom exception handler for DRF that handles our custom exceptions.

    Args:
        exc: The exception instance
        context: The context dictionary

    Returns:
        Response object with error details
    """
    if isinstance(exc, BaseAPIException):
        if exc.status_code >= 500:
            logger.error(
                "API error",
                error_code=exc.error_code,
                detail=exc.detail,
                view=context.get('view').__class__.__name__ if context.get('view') else None,
            )
        return Response(exc.to_dict(), status=exc.status_code)

    # Let DRF handle other exceptions
    response = exception_handler(exc, context)
    if response is None:
        # Unexpected failure: full detail goes to the log, never to the client
        logger.error(
            "Unhandled API exception",
            view=context.get('view').__class__.__name__ if context.get('view') else None,
            error=str(exc),
            exc_info=exc,
        )
        return Response(
            {'success': False, 'error': GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    # Reshape DRF's default error response into our envelope
    if isinstance(exc, drf_exceptions.ParseError):
        response.data = {
            'success': False,
            'error': 'Validation failed',
            'details': {'non_field_errors': [str(exc.detail)]},
        }
    elif isinstance(exc, drf_exceptions.ValidationError):
        details = response.data if isinstance(response.data, dict) else {'non_field_errors': response.data}
        response.data = {
            'success': False,
            'error': 'Validation failed',
            'details': details,
        }
    else:
        detail = response.data.get('detail', str(exc)) if isinstance(response.data, dict) else str(response.data)
        response.data = {
            'success': False,
            'error': str(detail),
        }

    return response
