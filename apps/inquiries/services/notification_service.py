"""
Notification service: email staff about a new inquiry through the Resend
transactional email API.

Delivery is best effort. Every failure path (missing configuration, provider
error, network error) is logged and reported as ``False``; nothing is raised
to the caller.
"""

from typing import Any, Dict, Optional

import httpx
import structlog
from django.conf import settings
from django.utils.html import format_html, format_html_join

from ..models import Inquiry

logger = structlog.get_logger(__name__)


def build_subject(inquiry: Inquiry) -> str:
    kind = 'Quote Request' if inquiry.is_quote else 'Contact Form'
    return f"New {kind} - {inquiry.name}"


def _detail_rows(inquiry: Inquiry):
    rows = [
        ('Name', inquiry.name),
        ('Email', inquiry.email),
        ('Phone', inquiry.phone),
    ]
    if inquiry.is_quote:
        rows += [
            ('Alternate Phone', inquiry.alternate_phone),
            ('Event Type', inquiry.get_event_type_display()),
            ('Event Date', inquiry.event_date.date().isoformat() if inquiry.event_date else ''),
            ('Guest Count', inquiry.guest_count),
            ('Venue', inquiry.venue),
            ('Menu Preference', inquiry.get_menu_preference_display()),
            ('Cuisine Preference', inquiry.cuisine_preference),
            ('Spice Level', inquiry.get_spice_level_display() if inquiry.spice_level else ''),
            ('Services', ', '.join(inquiry.services or [])),
            ('Budget', inquiry.get_budget_display() if inquiry.budget else ''),
            ('Special Requirements', inquiry.special_requirements),
        ]
    else:
        rows.append(('Event Type', inquiry.get_event_type_display()))
    # Optional fields are listed only when filled in
    return [(label, value) for label, value in rows if value not in (None, '')]


def build_email_html(inquiry: Inquiry, site_url: str) -> str:
    """Render the notification body. All submitted values are HTML-escaped."""
    heading = 'Quote Request' if inquiry.is_quote else 'Contact Form Submission'
    details = format_html_join(
        '\n', '<p><strong>{}:</strong> {}</p>', _detail_rows(inquiry)
    )
    message = format_html(
        '<p><strong>Message:</strong></p><p>{}</p>', inquiry.message
    ) if inquiry.message else ''
    admin_url = f"{site_url}/admin/collections/inquiries/{inquiry.id}"

    return format_html(
        '<!DOCTYPE html>'
        '<html><body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">'
        '<div style="max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<div style="background: #2B3A67; color: white; padding: 20px; text-align: center;">'
        '<h1>New {}</h1></div>'
        '<div style="padding: 20px; background: #f9f9f9;">{}{}<hr>'
        '<p><small>Inquiry ID: {}</small></p>'
        '<p><a href="{}">View in Admin Panel</a></p></div>'
        '<div style="padding: 20px; text-align: center; font-size: 12px; color: #666;">'
        '<p>This email was sent from the Ada-e-Haandi website contact form.</p></div>'
        '</div></body></html>',
        heading, details, message, inquiry.id, admin_url,
    )


class EmailNotifier:
    """
    Sends inquiry alerts to the configured staff inbox.

    Single Responsibility: one outbound POST per inquiry. Scheduling and
    retries are the caller's concern.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str,
        sender: str,
        recipient: str,
        site_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.sender = sender
        self.recipient = recipient
        self.site_url = site_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, transport: Optional[httpx.BaseTransport] = None) -> 'EmailNotifier':
        return cls(
            api_key=settings.RESEND_API_KEY,
            api_url=settings.RESEND_API_URL,
            sender=settings.EMAIL_FROM,
            recipient=settings.EMAIL_TO,
            site_url=settings.PUBLIC_SITE_URL,
            timeout=settings.EMAIL_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, inquiry: Inquiry) -> Dict[str, Any]:
        return {
            'from': self.sender,
            'to': self.recipient,
            'subject': build_subject(inquiry),
            'html': build_email_html(inquiry, self.site_url),
        }

    def send(self, inquiry: Inquiry) -> bool:
        """
        Send the alert for ``inquiry``.

        Returns:
            True if the provider accepted the message, False if it was skipped
            or failed
        """
        if not self.is_configured:
            logger.info(
                "Email API key not configured, skipping inquiry notification",
                inquiry_id=str(inquiry.id),
                name=inquiry.name,
                email=inquiry.email,
            )
            return False

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(
                    self.api_url,
                    json=self.build_payload(inquiry),
                    headers={'Authorization': f'Bearer {self.api_key}'},
                )
        except httpx.HTTPError as e:
            logger.warning(
                "Inquiry notification request failed",
                inquiry_id=str(inquiry.id),
                error=str(e),
                type=type(e).__name__,
            )
            return False

        if response.is_success:
            logger.info("Inquiry notification sent", inquiry_id=str(inquiry.id), status=response.status_code)
            return True

        logger.error(
            "Inquiry notification rejected by provider",
            inquiry_id=str(inquiry.id),
            status=response.status_code,
            body=response.text[:500],
        )
        return False
