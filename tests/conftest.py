import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.inquiries import tasks
from apps.inquiries.services.rate_limiter import get_rate_limiter


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    get_rate_limiter().reset()
    yield
    get_rate_limiter().reset()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(username="staff", password="pw-for-tests", is_staff=True)


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def queued_notifications(monkeypatch):
    """Replace the notification task; collects the inquiry ids it is queued with."""
    queued = []

    class RecordingTask:
        def delay(self, inquiry_id):
            queued.append(inquiry_id)

    monkeypatch.setattr(tasks, "send_inquiry_notification", RecordingTask())
    return queued


@pytest.fixture
def contact_payload():
    return {
        "type": "contact",
        "name": "Aarav Mehta",
        "email": "aarav@example.com",
        "phone": "9876543210",
        "message": "Do you cater small office lunches?",
    }


@pytest.fixture
def quote_payload():
    return {
        "type": "quote",
        "name": "Priya Singh",
        "email": "priya@example.com",
        "phone": "9999999999",
        "eventType": "wedding",
        "eventDate": "2026-03-01",
        "guestCount": "150",
        "dietaryPreference": "both",
    }
