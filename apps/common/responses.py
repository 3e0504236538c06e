"""
Standardized response helpers for consistent API responses.
"""
from typing import Dict, Any, Optional
from rest_framework.response import Response
from rest_framework import status


def success_response(
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
    **fields: Any
) -> Response:
    """
    Create a standardized success response.

    Args:
        message: Optional success message
        status_code: HTTP status code
        **fields: Extra top-level fields (e.g. ``id``)

    Returns:
        Response object
    """
    response_data: Dict[str, Any] = {'success': True}

    if message:
        response_data['message'] = message

    response_data.update(fields)
    return Response(response_data, status=status_code)


def error_response(
    message: str,
    details: Optional[Dict] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST
) -> Response:
    """
    Create a standardized error response.

    Args:
        message: Error message
        details: Optional dictionary of field-specific errors
        status_code: HTTP status code

    Returns:
        Response object
    """
    response_data: Dict[str, Any] = {
        'success': False,
        'error': message,
    }

    if details:
        response_data['details'] = details

    return Response(response_data, status=status_code)
