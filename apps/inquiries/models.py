from django.conf import settings
from django.db.models import (
    Model, UUIDField, CharField, TextField, EmailField, DateTimeField,
    PositiveIntegerField, JSONField, ForeignKey, SET_NULL,
)
import uuid


EVENT_TYPE_CHOICES = [
    ('wedding', 'Wedding'),
    ('corporate', 'Corporate Event'),
    ('private-party', 'Private Party'),
    ('religious', 'Religious Ceremony'),
    ('birthday', 'Birthday Party'),
    ('anniversary', 'Anniversary'),
    ('engagement', 'Engagement'),
    ('festival', 'Festival'),
    ('other', 'Other'),
]

BUDGET_CHOICES = [
    ('under-50k', 'Under ₹50,000'),
    ('50k-1l', '₹50,000 - ₹1,00,000'),
    ('1l-2.5l', '₹1,00,000 - ₹2,50,000'),
    ('2.5l-5l', '₹2,50,000 - ₹5,00,000'),
    ('above-5l', 'Above ₹5,00,000'),
    ('not-sure', 'Not sure'),
]

MENU_PREFERENCE_CHOICES = [
    ('veg-only', 'Vegetarian Only'),
    ('nonveg-only', 'Non-Vegetarian Only'),
    ('both', 'Both Veg & Non-Veg'),
    ('not-decided', 'Not decided'),
]

SPICE_LEVEL_CHOICES = [
    ('mild', 'Mild'),
    ('medium', 'Medium'),
    ('spicy', 'Spicy'),
]

SERVICE_CHOICES = [
    ('full-catering', 'Full Catering'),
    ('live-counters', 'Live Counters'),
    ('buffet', 'Buffet Setup'),
    ('sit-down', 'Sit-down Service'),
    ('staff', 'Staff & Service'),
    ('crockery', 'Crockery & Cutlery'),
    ('tent', 'Tent & Furniture'),
]

SOURCE_CHOICES = [
    ('website', 'Website Form'),
    ('whatsapp', 'WhatsApp'),
    ('phone', 'Phone Call'),
    ('referral', 'Referral'),
    ('social', 'Social Media'),
    ('other', 'Other'),
]

INQUIRY_TYPE_CHOICES = [
    ('contact', 'Contact Form'),
    ('quote', 'Quote Request'),
]

STATUS_CHOICES = [
    ('new', 'New'),
    ('contacted', 'Contacted'),
    ('quote-sent', 'Quote Sent'),
    ('follow-up', 'Follow Up'),
    ('converted', 'Converted'),
    ('lost', 'Lost'),
    ('closed', 'Closed'),
]


class Inquiry(Model):
    """A contact form or quote request submitted through the website."""

    COLLECTION = 'inquiries'

    id = UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = DateTimeField(auto_now_add=True)
    updated_at = DateTimeField(auto_now=True)

    inquiry_type = CharField(max_length=10, choices=INQUIRY_TYPE_CHOICES, default='contact')
    name = CharField(max_length=255)
    email = EmailField()
    phone = CharField(max_length=50)
    alternate_phone = CharField(max_length=50, blank=True)

    event_type = CharField(max_length=20, choices=EVENT_TYPE_CHOICES)
    event_date = DateTimeField(blank=True, null=True)
    guest_count = PositiveIntegerField(blank=True, null=True)
    venue = CharField(max_length=255, blank=True)
    budget = CharField(max_length=20, choices=BUDGET_CHOICES, blank=True)

    menu_preference = CharField(max_length=20, choices=MENU_PREFERENCE_CHOICES, default='not-decided')
    cuisine_preference = CharField(max_length=255, blank=True)
    spice_level = CharField(max_length=10, choices=SPICE_LEVEL_CHOICES, blank=True)
    special_requirements = TextField(blank=True)
    services = JSONField(default=list, blank=True)  # List of SERVICE_CHOICES values

    message = TextField(blank=True)
    source = CharField(max_length=20, choices=SOURCE_CHOICES, default='website')
    status = CharField(max_length=20, choices=STATUS_CHOICES, default='new')

    # Staff-only fields
    notes = TextField(blank=True, null=True)
    assigned_to = ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=SET_NULL, blank=True, null=True, related_name='inquiries'
    )

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Inquiry'
        verbose_name_plural = 'Inquiries'

    def __str__(self):
        return f"{self.name} - {self.get_event_type_display()}"

    @property
    def is_quote(self) -> bool:
        return self.inquiry_type == 'quote'
