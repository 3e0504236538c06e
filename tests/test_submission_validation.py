"""
Unit tests for submission serializers and the form-to-record mapping.
"""

from datetime import datetime, timezone

import pytest

from apps.inquiries.normalization import map_dietary_preference, to_record
from apps.inquiries.serializers import (
    ContactInquirySerializer,
    InquiryTypeSerializer,
    QuoteInquirySerializer,
    get_submission_serializer,
)


@pytest.mark.parametrize("preference, expected", [
    ("veg", "veg-only"),
    ("nonveg", "nonveg-only"),
    ("both", "both"),
    ("VEG", "not-decided"),
    ("vegan", "not-decided"),
    ("", "not-decided"),
    (None, "not-decided"),
    (["veg"], "not-decided"),
])
def test_map_dietary_preference(preference, expected):
    assert map_dietary_preference(preference) == expected


def test_get_submission_serializer_dispatches_on_type(contact_payload, quote_payload):
    assert isinstance(get_submission_serializer(contact_payload), ContactInquirySerializer)
    assert isinstance(get_submission_serializer(quote_payload), QuoteInquirySerializer)
    assert isinstance(get_submission_serializer({"type": "other"}), InquiryTypeSerializer)
    assert isinstance(get_submission_serializer({"type": ["quote"]}), InquiryTypeSerializer)


def test_non_object_body_is_rejected():
    serializer = get_submission_serializer(["not", "an", "object"])
    assert not serializer.is_valid()
    assert "non_field_errors" in serializer.errors


def test_contact_message_is_required(contact_payload):
    del contact_payload["message"]
    serializer = get_submission_serializer(contact_payload)
    assert not serializer.is_valid()
    assert serializer.errors["message"] == ["Message is required"]


def test_quote_message_is_optional(quote_payload):
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors


def test_unknown_fields_are_ignored(contact_payload):
    contact_payload["utm_source"] = "instagram"
    serializer = get_submission_serializer(contact_payload)
    assert serializer.is_valid(), serializer.errors
    assert "utm_source" not in serializer.validated_data


@pytest.mark.parametrize("event_date, expected", [
    ("2026-03-01", datetime(2026, 3, 1, tzinfo=timezone.utc)),
    ("2026-03-01T18:30:00", datetime(2026, 3, 1, 18, 30, tzinfo=timezone.utc)),
    ("2026-03-02T00:00:00+05:30", datetime(2026, 3, 1, 18, 30, tzinfo=timezone.utc)),
])
def test_event_date_becomes_utc_timestamp(quote_payload, event_date, expected):
    quote_payload["eventDate"] = event_date
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["eventDate"] == expected


@pytest.mark.parametrize("event_date", [
    "next saturday",
    "2026-02-30",
    "01/03/2026",
    "9999-12-31T23:00:00-05:00",
    "0001-01-01T00:30:00+01:00",
])
def test_invalid_event_date_is_rejected(quote_payload, event_date):
    quote_payload["eventDate"] = event_date
    serializer = get_submission_serializer(quote_payload)
    assert not serializer.is_valid()
    assert serializer.errors["eventDate"] == ["Invalid event date"]


@pytest.mark.parametrize("guest_count, error", [
    ("about 100", "Guest count must be a number"),
    ("-5", "Guest count must be a number"),
    ("0", "Guest count must be at least 1"),
    ("1000001", "Guest count is too large"),
    ("1" * 5000, "Guest count is too large"),
])
def test_invalid_guest_count_is_rejected(quote_payload, guest_count, error):
    quote_payload["guestCount"] = guest_count
    serializer = get_submission_serializer(quote_payload)
    assert not serializer.is_valid()
    assert serializer.errors["guestCount"] == [error]


def test_numeric_guest_count_is_accepted(quote_payload):
    quote_payload["guestCount"] = 200
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["guestCount"] == 200


def test_quote_enumerations_are_checked(quote_payload):
    quote_payload.update({
        "eventType": "bar-mitzvah",
        "dietaryPreference": "vegan",
        "spiceLevel": "extra-hot",
        "services": ["buffet", "fireworks"],
        "budget": "unlimited",
    })
    serializer = get_submission_serializer(quote_payload)
    assert not serializer.is_valid()
    assert set(serializer.errors) == {"eventType", "dietaryPreference", "spiceLevel", "services", "budget"}


def test_to_record_for_contact_defaults_event_type(contact_payload):
    serializer = get_submission_serializer(contact_payload)
    assert serializer.is_valid(), serializer.errors

    record = to_record(serializer.validated_data)

    assert record == {
        "inquiry_type": "contact",
        "name": "Aarav Mehta",
        "email": "aarav@example.com",
        "phone": "9876543210",
        "message": "Do you cater small office lunches?",
        "source": "website",
        "status": "new",
        "event_type": "other",
    }


def test_to_record_for_quote(quote_payload):
    quote_payload["services"] = ["buffet"]
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors

    record = to_record(serializer.validated_data)

    assert record["inquiry_type"] == "quote"
    assert record["event_type"] == "wedding"
    assert record["event_date"] == datetime(2026, 3, 1, tzinfo=timezone.utc)
    assert record["guest_count"] == 150
    assert record["menu_preference"] == "both"
    assert record["services"] == ["buffet"]
    assert record["message"] == ""
    assert record["venue"] == ""
    assert (record["source"], record["status"]) == ("website", "new")


def test_to_record_without_dietary_preference_is_not_decided(quote_payload):
    del quote_payload["dietaryPreference"]
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors
    assert to_record(serializer.validated_data)["menu_preference"] == "not-decided"


def test_guest_count_with_leading_zeros_is_accepted(quote_payload):
    quote_payload["guestCount"] = "0" * 5000 + "150"
    serializer = get_submission_serializer(quote_payload)
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["guestCount"] == 150


@pytest.mark.parametrize("field, value, error", [
    ("name", "A" * 256, "Name must be at most 255 characters"),
    ("phone", "9" * 51, "Phone number must be at most 50 characters"),
])
def test_overlong_identity_fields_are_rejected(contact_payload, field, value, error):
    contact_payload[field] = value
    serializer = get_submission_serializer(contact_payload)
    assert not serializer.is_valid()
    assert serializer.errors[field] == [error]
