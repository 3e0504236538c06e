import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Inquiry",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "inquiry_type",
                    models.CharField(
                        choices=[("contact", "Contact Form"), ("quote", "Quote Request")],
                        default="contact",
                        max_length=10,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=50)),
                ("alternate_phone", models.CharField(blank=True, max_length=50)),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("wedding", "Wedding"),
                            ("corporate", "Corporate Event"),
                            ("private-party", "Private Party"),
                            ("religious", "Religious Ceremony"),
                            ("birthday", "Birthday Party"),
                            ("anniversary", "Anniversary"),
                            ("engagement", "Engagement"),
                            ("festival", "Festival"),
                            ("other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                ("event_date", models.DateTimeField(blank=True, null=True)),
                ("guest_count", models.PositiveIntegerField(blank=True, null=True)),
                ("venue", models.CharField(blank=True, max_length=255)),
                (
                    "budget",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("under-50k", "Under ₹50,000"),
                            ("50k-1l", "₹50,000 - ₹1,00,000"),
                            ("1l-2.5l", "₹1,00,000 - ₹2,50,000"),
                            ("2.5l-5l", "₹2,50,000 - ₹5,00,000"),
                            ("above-5l", "Above ₹5,00,000"),
                            ("not-sure", "Not sure"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "menu_preference",
                    models.CharField(
                        choices=[
                            ("veg-only", "Vegetarian Only"),
                            ("nonveg-only", "Non-Vegetarian Only"),
                            ("both", "Both Veg & Non-Veg"),
                            ("not-decided", "Not decided"),
                        ],
                        default="not-decided",
                        max_length=20,
                    ),
                ),
                ("cuisine_preference", models.CharField(blank=True, max_length=255)),
                (
                    "spice_level",
                    models.CharField(
                        blank=True,
                        choices=[("mild", "Mild"), ("medium", "Medium"), ("spicy", "Spicy")],
                        max_length=10,
                    ),
                ),
                ("special_requirements", models.TextField(blank=True)),
                ("services", models.JSONField(blank=True, default=list)),
                ("message", models.TextField(blank=True)),
                (
                    "source",
                    models.CharField(
                        choices=[
                            ("website", "Website Form"),
                            ("whatsapp", "WhatsApp"),
                            ("phone", "Phone Call"),
                            ("referral", "Referral"),
                            ("social", "Social Media"),
                            ("other", "Other"),
                        ],
                        default="website",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("new", "New"),
                            ("contacted", "Contacted"),
                            ("quote-sent", "Quote Sent"),
                            ("follow-up", "Follow Up"),
                            ("converted", "Converted"),
                            ("lost", "Lost"),
                            ("closed", "Closed"),
                        ],
                        default="new",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                (
                    "assigned_to",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inquiries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Inquiry",
                "verbose_name_plural": "Inquiries",
                "ordering": ["-created_at"],
            },
        ),
    ]
