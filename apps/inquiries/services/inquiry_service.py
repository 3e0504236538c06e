"""
Inquiry Service
Handles public inquiry intake, separated from views.
"""
import threading
from typing import Any

import structlog
from django.conf import settings
from django.db import DatabaseError, connection, transaction

from apps.common.document_store import document_store
from apps.common.exception_handler import GENERIC_ERROR_MESSAGE
from apps.common.exceptions import InternalServerError, TooManyRequestsError, ValidationError
from ..models import Inquiry
from ..normalization import to_record
from ..serializers import get_submission_serializer
from .rate_limiter import RateLimiter, get_rate_limiter

logger = structlog.get_logger(__name__)


class InquiryService:
    """
    Service for the public contact and quote forms.
    Single responsibility: rate limit, validate, normalize, persist, notify.
    """

    def __init__(self, rate_limiter: RateLimiter = None, store=document_store):
        self._rate_limiter = rate_limiter
        self._store = store

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter or get_rate_limiter()

    def check_rate_limit(self, client_key: str) -> None:
        """
        Raises:
            TooManyRequestsError: If the client has used up its window
        """
        if not self.rate_limiter.allow(client_key):
            logger.warning("Inquiry rate limit exceeded", client_key=client_key)
            raise TooManyRequestsError()

    def submit(self, payload: Any) -> Inquiry:
        """
        Create an Inquiry from a public form submission.

        Callers apply check_rate_limit first, before the body is parsed.

        Args:
            payload: Parsed request body

        Returns:
            The persisted Inquiry

        Raises:
            ValidationError: Payload rejected, with per-field errors
            InternalServerError: The record could not be stored
        """
        return self.create(self.validate(payload))

    def validate(self, payload: Any) -> dict:
        serializer = get_submission_serializer(payload)
        if not serializer.is_valid():
            logger.info("Inquiry validation failed", fields=sorted(serializer.errors))
            raise ValidationError(errors=serializer.errors)
        return serializer.validated_data

    def create(self, validated_data: dict) -> Inquiry:
        record = to_record(validated_data)
        try:
            inquiry = self._store.create(Inquiry.COLLECTION, record)
        except DatabaseError as e:
            logger.error(
                "Failed to store inquiry",
                inquiry_type=record['inquiry_type'],
                email=record['email'],
                error=str(e),
                exc_info=True,
            )
            raise InternalServerError(GENERIC_ERROR_MESSAGE, detail=str(e)) from e

        logger.info(
            "Inquiry created",
            inquiry_id=str(inquiry.id),
            inquiry_type=inquiry.inquiry_type,
            event_type=inquiry.event_type,
        )
        self.schedule_notification(inquiry)
        return inquiry

    @staticmethod
    def schedule_notification(inquiry: Inquiry) -> None:
        """
        Queue the staff email once the inquiry's transaction has committed.

        With CELERY_TASK_ALWAYS_EAGER the task body runs inside ``delay()``,
        so the call is moved to a daemon thread and the response does not
        wait on the email provider.
        """
        inquiry_id = str(inquiry.id)

        def enqueue():
            from ..tasks import send_inquiry_notification

            try:
                send_inquiry_notification.delay(inquiry_id)
            except Exception as e:
                logger.error(
                    "Failed to queue inquiry notification",
                    inquiry_id=inquiry_id,
                    error=str(e),
                    exc_info=True,
                )

        def send_in_background():
            try:
                enqueue()
            finally:
                connection.close()

        def on_commit():
            if getattr(settings, 'CELERY_TASK_ALWAYS_EAGER', False):
                threading.Thread(
                    target=send_in_background, name=f"inquiry-notify-{inquiry_id}", daemon=True
                ).start()
            else:
                enqueue()

        transaction.on_commit(on_commit)
