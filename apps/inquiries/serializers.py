from datetime import datetime, time, timezone as dt_timezone

from django.contrib.auth import get_user_model
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from .models import (
    Inquiry, BUDGET_CHOICES, EVENT_TYPE_CHOICES, INQUIRY_TYPE_CHOICES,
    SERVICE_CHOICES, SPICE_LEVEL_CHOICES, STATUS_CHOICES,
)

MAX_GUEST_COUNT = 100000

DIETARY_PREFERENCE_CHOICES = [
    ('veg', 'Vegetarian'),
    ('nonveg', 'Non-Vegetarian'),
    ('both', 'Both'),
]

NAME_ERRORS = {
    'required': 'Name is required',
    'blank': 'Name must be at least 2 characters',
    'min_length': 'Name must be at least 2 characters',
    'max_length': 'Name must be at most 255 characters',
}
EMAIL_ERRORS = {
    'required': 'Email is required',
    'blank': 'Invalid email address',
    'invalid': 'Invalid email address',
}
PHONE_ERRORS = {
    'required': 'Phone number is required',
    'blank': 'Phone number must be at least 10 digits',
    'min_length': 'Phone number must be at least 10 digits',
    'max_length': 'Phone number must be at most 50 characters',
}
MESSAGE_ERRORS = {
    'required': 'Message is required',
    'blank': 'Message must be at least 10 characters',
    'min_length': 'Message must be at least 10 characters',
}


def _optional_text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, **kwargs)


def _optional_choice(choices, message):
    return serializers.ChoiceField(
        choices=choices, required=False, allow_blank=True,
        error_messages={'invalid_choice': message},
    )


class InquiryTypeSerializer(serializers.Serializer):
    """Validates only the ``type`` discriminator; used when it is missing or unknown."""
    type = serializers.ChoiceField(
        choices=INQUIRY_TYPE_CHOICES,
        error_messages={
            'required': 'Inquiry type is required',
            'invalid_choice': 'Inquiry type must be "contact" or "quote"',
        },
    )


class InquirySubmissionSerializer(InquiryTypeSerializer):
    """Identity fields shared by every public form."""
    name = serializers.CharField(min_length=2, max_length=255, error_messages=NAME_ERRORS)
    email = serializers.EmailField(error_messages=EMAIL_ERRORS)
    phone = serializers.CharField(min_length=10, max_length=50, error_messages=PHONE_ERRORS)


class ContactInquirySerializer(InquirySubmissionSerializer):
    eventType = _optional_choice(EVENT_TYPE_CHOICES, 'Invalid event type')
    message = serializers.CharField(min_length=10, error_messages=MESSAGE_ERRORS)


class QuoteInquirySerializer(InquirySubmissionSerializer):
    alternatePhone = _optional_text(max_length=50)
    eventType = serializers.ChoiceField(
        choices=EVENT_TYPE_CHOICES,
        error_messages={
            'required': 'Event type is required',
            'blank': 'Event type is required',
            'invalid_choice': 'Invalid event type',
        },
    )
    eventDate = serializers.CharField(error_messages={
        'required': 'Event date is required',
        'blank': 'Event date is required',
    })
    guestCount = serializers.CharField(error_messages={
        'required': 'Guest count is required',
        'blank': 'Guest count is required',
    })
    venue = _optional_text(max_length=255)
    cuisinePreference = _optional_text(max_length=255)
    dietaryPreference = _optional_choice(DIETARY_PREFERENCE_CHOICES, 'Invalid dietary preference')
    spiceLevel = _optional_choice(SPICE_LEVEL_CHOICES, 'Invalid spice level')
    specialRequirements = _optional_text()
    services = serializers.ListField(
        child=serializers.ChoiceField(
            choices=SERVICE_CHOICES, error_messages={'invalid_choice': 'Invalid service'}
        ),
        required=False,
    )
    budget = _optional_choice(BUDGET_CHOICES, 'Invalid budget range')
    message = _optional_text()

    def validate_eventDate(self, value):
        """Accept an ISO date or datetime; return an aware UTC datetime."""
        try:
            parsed = parse_datetime(value)
            if parsed is None:
                day = parse_date(value)
                parsed = datetime.combine(day, time.min) if day else None
            if parsed is not None:
                if timezone.is_naive(parsed):
                    parsed = parsed.replace(tzinfo=dt_timezone.utc)
                # Offsets can push the instant outside years 1-9999
                return parsed.astimezone(dt_timezone.utc)
        except (ValueError, OverflowError):
            pass
        raise serializers.ValidationError('Invalid event date')

    def validate_guestCount(self, value):
        if not value.isdecimal():
            raise serializers.ValidationError('Guest count must be a number')
        digits = value.lstrip('0') or '0'
        if len(digits) > len(str(MAX_GUEST_COUNT)):
            raise serializers.ValidationError('Guest count is too large')
        count = int(digits)
        if count < 1:
            raise serializers.ValidationError('Guest count must be at least 1')
        if count > MAX_GUEST_COUNT:
            raise serializers.ValidationError('Guest count is too large')
        return count


SUBMISSION_SERIALIZERS = {
    'contact': ContactInquirySerializer,
    'quote': QuoteInquirySerializer,
}


def get_submission_serializer(data):
    """
    Pick the serializer variant for the payload's ``type`` discriminator.

    Payloads without a recognised ``type`` get InquiryTypeSerializer, so the
    only error reported is the one on ``type`` itself.
    """
    inquiry_type = data.get('type') if hasattr(data, 'get') else None
    if not isinstance(inquiry_type, str):
        inquiry_type = None
    serializer_class = SUBMISSION_SERIALIZERS.get(inquiry_type, InquiryTypeSerializer)
    return serializer_class(data=data)


class InquirySerializer(serializers.ModelSerializer):
    """Staff-facing representation, using the same field names as the public forms."""
    type = serializers.CharField(source='inquiry_type', read_only=True)
    alternatePhone = serializers.CharField(source='alternate_phone', read_only=True)
    eventType = serializers.CharField(source='event_type', read_only=True)
    eventDate = serializers.DateTimeField(source='event_date', read_only=True)
    guestCount = serializers.IntegerField(source='guest_count', read_only=True)
    menuPreference = serializers.CharField(source='menu_preference', read_only=True)
    cuisinePreference = serializers.CharField(source='cuisine_preference', read_only=True)
    spiceLevel = serializers.CharField(source='spice_level', read_only=True)
    specialRequirements = serializers.CharField(source='special_requirements', read_only=True)
    assignedTo = serializers.PrimaryKeyRelatedField(source='assigned_to', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Inquiry
        fields = [
            'id', 'type', 'name', 'email', 'phone', 'alternatePhone', 'eventType',
            'eventDate', 'guestCount', 'venue', 'budget', 'menuPreference',
            'cuisinePreference', 'spiceLevel', 'specialRequirements', 'services',
            'message', 'source', 'status', 'notes', 'assignedTo', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields


class InquiryUpdateSerializer(serializers.ModelSerializer):
    """Staff edits outside the status workflow: internal notes and assignment."""
    assignedTo = serializers.PrimaryKeyRelatedField(
        source='assigned_to',
        queryset=get_user_model().objects.filter(is_active=True),
        allow_null=True,
        required=False,
    )

    class Meta:
        model = Inquiry
        fields = ['notes', 'assignedTo']


class InquiryStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=STATUS_CHOICES, error_messages={'invalid_choice': 'Invalid status'}
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
