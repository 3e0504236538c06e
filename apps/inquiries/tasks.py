"""
Celery tasks for inquiry notifications.

Notification runs outside the request so a slow or failing email provider
never delays or fails an inquiry submission.
"""

import structlog
from celery import shared_task

from .models import Inquiry
from .services.notification_service import EmailNotifier

logger = structlog.get_logger(__name__)


@shared_task(ignore_result=True)
def send_inquiry_notification(inquiry_id: str):
    """Email staff about a newly created inquiry. Failures are logged, never retried."""
    try:
        inquiry = Inquiry.objects.get(id=inquiry_id)
    except Inquiry.DoesNotExist:
        logger.error("Inquiry not found for notification", inquiry_id=inquiry_id)
        return {"status": "error", "error": "Inquiry not found"}

    sent = EmailNotifier.from_settings().send(inquiry)
    return {"status": "sent" if sent else "skipped", "inquiry_id": inquiry_id}
