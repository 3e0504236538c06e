"""
Common exceptions for the application.

This module defines custom exception classes for consistent error handling
across the application. Every exception renders to the same envelope:
``{"success": false, "error": <message>, ...extra_data}``.
"""

from typing import Optional, Dict, Any


class BaseAPIException(Exception):
    """
    Base exception class for all API-related errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        status_code: int = 500,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message returned to the client
            detail: Detailed error information, kept for server-side logs
            status_code: HTTP status code
            error_code: Application-specific error code
            extra_data: Additional data merged into the response body
        """
        self.message = message
        self.detail = detail or message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.extra_data = extra_data or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        ``detail`` is deliberately left out; it may carry internal information.
        """
        result = {
            'success': False,
            'error': self.message,
        }
        if self.extra_data:
            result.update(self.extra_data)
        return result


class ValidationError(BaseAPIException):
    """Exception for validation errors (400 Bad Request)."""

    def __init__(self, message: str = 'Validation failed', errors: Optional[Dict[str, Any]] = None):
        super().__init__(message, None, 400, 'ValidationError', {'details': errors or {}})
        self.errors = errors or {}


class NotFoundError(BaseAPIException):
    """Exception for resource not found errors (404 Not Found)."""

    def __init__(self, message: str, detail: Optional[str] = None, resource_type: Optional[str] = None):
        super().__init__(message, detail, 404, 'NotFoundError')
        self.resource_type = resource_type


class TooManyRequestsError(BaseAPIException):
    """Exception for rate-limited clients (429 Too Many Requests)."""

    def __init__(self, message: str = 'Too many requests. Please try again later.'):
        super().__init__(message, None, 429, 'TooManyRequestsError')


class InternalServerError(BaseAPIException):
    """Exception for internal server errors (500 Internal Server Error)."""

    def __init__(self, message: str = 'An internal error occurred', detail: Optional[str] = None):
        super().__init__(message, detail, 500, 'InternalServerError')


class CollectionNotFoundError(NotFoundError):
    """Raised when the document store has no model bound to a collection."""

    def __init__(self, collection: str):
        super().__init__(
            f'Collection not found: {collection}',
            f'No model is registered for the collection "{collection}"',
            resource_type='Collection'
        )
        self.collection = collection
